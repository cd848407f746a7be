"""
samvidhan/assistants/education.py
Education rights guidance (Article 21A and the RTE Act)
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, complaint_letters, legal_option

RTE = "Right to Education Act"


def _education(issue_id, name, description, urgency, constitutional, legal, immediate, remedies, subject=None):
    return IssueType(
        id=issue_id,
        name=name,
        description=description,
        category="rights",
        urgency=urgency,
        constitutional=constitutional,
        legal=legal,
        timeline="30-60 days",
        immediate=immediate,
        remedies=remedies,
        subject=subject,
    )


ISSUE_TYPES = [
    _education(
        "right_to_education", "Right to Education",
        "Fundamental right to education for all children", "high",
        ["Article 21A", "Article 14", "Article 21"], [RTE, "Constitutional Law"],
        ["Apply for admission at the neighbourhood school", "Keep a copy of the application and any refusal"],
        ["Complain to the School Management Committee", "Approach the State Commission for Protection of Child Rights"],
        subject="education",
    ),
    _education(
        "admission_rights", "Admission Rights",
        "Right to fair and transparent admission processes", "medium",
        ["Article 21A", "Article 14"], [RTE, "Admission Rules"],
        ["Ask for the admission criteria in writing", "Apply under the 25% EWS quota where eligible"],
        ["Complain to the District Education Officer about capitation fees or screening"],
        subject="admission",
    ),
    _education(
        "discrimination", "Education Discrimination",
        "Protection against discrimination in education", "high",
        ["Article 14", "Article 15"], ["SC/ST Act", "Discrimination Laws"],
        ["Record each incident with witnesses", "Inform the principal in writing"],
        ["Complain to the National Commission for Scheduled Castes", "File a police complaint for atrocities"],
        subject="discrimination",
    ),
    _education(
        "special_education", "Special Education",
        "Education rights for children with special needs", "medium",
        ["Article 21", "Article 14"], ["Rights of Persons with Disabilities Act 2016", RTE],
        ["Get a disability certificate", "Request reasonable accommodation in writing"],
        ["Complain to the State Commissioner for Persons with Disabilities"],
        subject="inclusive education",
    ),
    _education(
        "teacher_rights", "Teacher Rights",
        "Rights and protections for teachers", "medium",
        ["Article 21", "Article 14"], ["Labor Laws", "Teacher Regulations"],
        ["Keep appointment and salary records"],
        ["Approach the school tribunal", "File a service writ petition"],
        subject="teacher service",
    ),
    _education(
        "student_discipline", "Student Discipline",
        "Fair and just discipline for students", "medium",
        ["Article 21", "Article 14"], ["Juvenile Justice Act", "School Rules"],
        ["Ask for the charges in writing", "Request a hearing before any action"],
        ["Complain about corporal punishment under RTE Section 17"],
        subject="school discipline",
    ),
    _education(
        "examination_rights", "Examination Rights",
        "Right to fair and transparent examinations", "medium",
        ["Article 21", "Article 14"], ["Examination Board Rules", "Public Examinations (Prevention of Unfair Means) Act 2024"],
        ["Apply for re-evaluation within the deadline", "Request a copy of the answer sheet under RTI"],
        ["Appeal to the examination board"],
        subject="examination",
    ),
    _education(
        "infrastructure", "School Infrastructure",
        "Right to safe and adequate school infrastructure", "medium",
        ["Article 21", "Article 14"], ["Building Regulations", "Infrastructure Standards"],
        ["Photograph unsafe buildings or missing toilets"],
        ["Complain to the District Education Officer", "Raise the issue in the School Management Committee"],
        subject="school infrastructure",
    ),
]

LEGAL_OPTIONS = {
    "default": {
        "smc": legal_option("Raise the issue in the School Management Committee", "7-30 days", 60, "None", "Low"),
        "deo": legal_option("Complaint to the District Education Officer", "30-60 days", 70, "None", "Low"),
        "scpcr": legal_option("Complaint to the State Commission for Protection of Child Rights", "30-90 days", 70, "None", "Medium"),
        "writ": legal_option("Writ petition in the High Court", "90-180 days", 65, "High", "High"),
    },
}

RESOURCES = {
    "authorities": [
        {"name": "National Commission for Protection of Child Rights", "website": "https://ncpcr.gov.in", "type": "commission"},
        {"name": "Ministry of Education", "website": "https://www.education.gov.in", "type": "ministry"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "Childline", "phone": "1098", "type": "child"},
        NALSA,
    ],
}

STATISTICS = {
    "totalComplaints": 85000,
    "successRate": 70,
    "averageResolutionTime": 40,
    "categories": {
        "admission": 30000,
        "fees": 20000,
        "discrimination": 15000,
        "infrastructure": 20000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "admission_rights",
        "title": "EWS Admission Granted",
        "description": "Private school admitted a child under the 25% quota after DEO intervention",
        "outcome": "success",
        "date": "2023-11-15",
        "timeline": "30 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21A": {
        "article": "Article 21A",
        "title": "Right to education",
        "description": "Free and compulsory education for all children aged six to fourteen",
    },
    "article45": {
        "article": "Article 45",
        "title": "Early childhood care and education",
        "description": "The State shall provide early childhood care and education until the age of six",
    },
    "landmark": {
        "case": "Unni Krishnan v. State of Andhra Pradesh (1993)",
        "description": "Recognised education as flowing from the right to life",
    },
}

LAWS = [
    {"name": "Right of Children to Free and Compulsory Education Act, 2009", "description": "Implements Article 21A", "year": 2009},
    {"name": "Rights of Persons with Disabilities Act, 2016", "description": "Inclusive education obligations", "year": 2016},
]

TEMPLATES = complaint_letters([
    {
        "type": "deo",
        "title": "Complaint to District Education Officer",
        "title_hi": "जिला शिक्षा अधिकारी को शिकायत",
        "authority": "District Education Officer",
        "authority_hi": "जिला शिक्षा अधिकारी",
        "subject": "Violation of the Right to Education Act by [School]",
        "subject_hi": "[विद्यालय] द्वारा शिक्षा का अधिकार अधिनियम का उल्लंघन",
        "law": "the Right of Children to Free and Compulsory Education Act 2009",
    },
])

EXTRAS = {
    "governmentSchemes": [
        {"name": "Samagra Shiksha", "benefit": "School education from pre-school to class 12"},
        {"name": "PM POSHAN", "benefit": "Mid-day meals in government schools"},
        {"name": "National Scholarship Portal", "benefit": "Central and state scholarships"},
    ],
}

assistant = SectorAssistant(
    slug="education",
    title="Education Rights Assistant",
    type_field="rightsType",
    issue_types=ISSUE_TYPES,
    legal_options=LEGAL_OPTIONS,
    resources=RESOURCES,
    contacts=CONTACTS,
    statistics=STATISTICS,
    recent_cases=RECENT_CASES,
    constitutional_basis=CONSTITUTIONAL_BASIS,
    laws=LAWS,
    templates=TEMPLATES,
    extras=EXTRAS,
)
