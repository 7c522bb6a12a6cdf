from src.domain.entities import Student


def make_student(credentials, student_id=1, email="david@example.com", password="paswoord"):
    student = Student.register(
        credentials,
        name="David",
        email=email,
        password=password,
        curriculum="TI",
        profile_identifier="david.op.de.beeck",
    )
    student.id = student_id
    return student
