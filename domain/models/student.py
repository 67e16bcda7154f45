"""
Student database model.
"""

from sqlalchemy import Column, Integer, Text

from domain.models.database import Base


class Student(Base):
    """Student record listed and updated by the student demo"""

    __tablename__ = "students"

    student_id = Column(Integer, primary_key=True, autoincrement=False)
    full_name = Column(Text, nullable=False)
    email = Column(Text)
    phone = Column(Text)

    def __repr__(self):
        return f"<Student(student_id={self.student_id}, full_name={self.full_name!r})>"
