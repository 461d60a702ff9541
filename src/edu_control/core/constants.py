"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from fractions import Fraction


class StorageKeys:
    USERS = "edu_users"
    ATTENDANCE = "edu_attendance"
    GRADES = "edu_grades"
    DISCIPLINE = "edu_discipline"
    SCHEDULE = "edu_schedule"
    LIBRARY = "edu_library"
    GROUPS = "edu_groups"
    NEWS = "edu_news"
    MESSAGES = "edu_direct_messages"
    SCORES = "edu_student_scores"
    AI_CHAT = "edu_ai_chat_history"


# Composite rating policy: 80% academic score, 20% attendance rate.
ACADEMIC_WEIGHT = Fraction("0.8")
ATTENDANCE_WEIGHT = Fraction("0.2")

# Attendance credit per status.
PRESENT_CREDIT = Fraction(1)
LATE_CREDIT = Fraction(1, 2)
ABSENT_CREDIT = Fraction(0)

# Rate assumed for a student without any attendance record.
DEFAULT_ATTENDANCE_RATE = 100

# (minimum rating, grade) evaluated highest first.
GRADE_THRESHOLDS = ((87, 5), (74, 4), (60, 3), (40, 2))
LOWEST_GRADE = 1

HIGH_ATTENDANCE_MIN = 80
LOW_ATTENDANCE_MAX = 50

MIN_SCORE = 0
MAX_SCORE = 100

COURSES = (1, 2, 3, 4)
SCHOOL_DAYS = 6
RECENT_MARKS = 8
MIN_PASSWORD_LENGTH = 6

SYSTEM_SUBJECTS = (
    "Mathematics",
    "Algorithms",
    "History",
    "Physics",
    "Literature",
    "Software Development",
    "Data Science",
    "Network Engineering",
    "Cybersecurity",
    "Management",
    "Economics",
    "Psychology",
    "Foreign Language",
    "Philosophy",
)

DEFAULT_GROUPS = (
    {"id": "1", "name": "CS-101", "department": "IT", "course": 1},
    {"id": "2", "name": "ECON-202", "department": "Economics", "course": 2},
    {"id": "3", "name": "IT-303", "department": "IT", "course": 3},
    {"id": "4", "name": "MGMT-404", "department": "Management", "course": 4},
)

DEFAULT_SCHEDULE = (
    {
        "id": "1",
        "group": "CS-101",
        "subject": "Математика",
        "teacher": "Султанов А.",
        "room": "304",
        "day": 0,
        "time": "08:30 - 10:00",
    },
)
