from student_attendance.students.naming import default_image, email_from_name, email_local_part


def test_email_drops_surname_and_punctuation():
    assert email_from_name("Mary Ann O'Brien") == "maryann@example.com"


def test_email_two_word_name_uses_first_name():
    assert email_from_name("John Doe", domain="school.test") == "john@school.test"


def test_email_single_word_name():
    assert email_local_part("  Cher ") == "cher"


def test_email_falls_back_to_roll_number_when_name_has_no_alphanumerics():
    assert email_from_name("!!! ???", fallback="S-007") == "s007@example.com"


def test_default_image_rotates():
    images = ("a", "b", "c")
    assert [default_image(n, images) for n in range(5)] == ["a", "b", "c", "a", "b"]
