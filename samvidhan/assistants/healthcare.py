"""
samvidhan/assistants/healthcare.py
Healthcare rights: emergency care, negligence, insurance and public health
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, NATIONAL_EMERGENCY, complaint_letters, legal_option

AMBULANCE = {"name": "Ambulance", "phone": "108", "type": "medical"}
CEA = "Clinical Establishments Act"

ISSUE_TYPES = [
    IssueType(
        id="emergency_care",
        name="Emergency Medical Care",
        description="Emergency medical treatment and urgent healthcare services",
        category="emergency",
        urgency="urgent",
        constitutional=["Article 21", "Article 14"],
        legal=[CEA, "Emergency Medical Services"],
        timeline="0-2 hours",
        immediate=[
            "Call 108 for an ambulance",
            "Go to the nearest hospital, public or private",
            "Insist on stabilisation before any payment or paperwork",
        ],
        remedies=[
            "Complain to the Chief Medical Officer about refusal of treatment",
            "Approach the State Human Rights Commission",
        ],
        milestones={
            "0-1 hours": "Reach the hospital and get stabilised",
            "1-7 days": "Written complaint about any refusal",
        },
        stages={
            "treatment": "0-1 days",
            "complaint": "1-7 days",
            "inquiry": "14-30 days",
        },
        subject="emergency care",
    ),
    IssueType(
        id="medical_negligence",
        name="Medical Negligence",
        description="Protection against medical negligence and malpractice",
        category="legal",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=["National Medical Commission Act", CEA],
        timeline="60-120 days",
        immediate=[
            "Request complete medical records in writing",
            "Get a second medical opinion",
            "Keep all bills and prescriptions",
        ],
        remedies=[
            "Complain to the State Medical Council",
            "File a consumer complaint for deficiency in service",
        ],
        subject="medical negligence",
    ),
    IssueType(
        id="patient_rights",
        name="Patient Rights",
        description="Protection of patient rights and dignity in healthcare",
        category="rights",
        urgency="medium",
        constitutional=["Article 21", "Article 14"],
        legal=[CEA, "Charter of Patients' Rights"],
        timeline="30-60 days",
        immediate=["Ask for an itemised bill and treatment records"],
        remedies=["Complain to the hospital grievance cell", "Complain to the district registering authority"],
        subject="patient rights",
    ),
    IssueType(
        id="insurance_rights",
        name="Health Insurance Rights",
        description="Protection of health insurance policyholders and claim rights",
        category="insurance",
        urgency="medium",
        constitutional=["Article 21", "Article 14"],
        legal=["Insurance Act", "IRDAI Regulations"],
        timeline="14-30 days",
        immediate=["Get the rejection reason in writing", "Collect discharge summary and bills"],
        remedies=["Complain to the insurer's grievance officer", "Approach the Insurance Ombudsman"],
        subject="health insurance",
    ),
    IssueType(
        id="public_health",
        name="Public Health Protection",
        description="Protection of public health and prevention of diseases",
        category="public",
        urgency="medium",
        constitutional=["Article 21", "Article 47"],
        legal=["Public Health Act", "Epidemic Diseases Act"],
        timeline="30-60 days",
        immediate=["Report the health hazard to the municipal health officer"],
        remedies=["File a public interest litigation"],
        subject="public health",
    ),
    IssueType(
        id="mental_health",
        name="Mental Healthcare",
        description="Mental health services and psychological support",
        category="mental",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=["Mental Healthcare Act", "Psychiatric Services"],
        timeline="0-2 hours",
        immediate=["Call Tele-MANAS on 14416", "Stay with the person if they are at risk"],
        remedies=["Complain to the State Mental Health Authority"],
        stages={
            "support": "0-1 days",
            "assessment": "1-7 days",
            "treatment_plan": "7-30 days",
        },
        subject="mental health",
    ),
    IssueType(
        id="pharmaceutical_rights",
        name="Pharmaceutical Rights",
        description="Protection of pharmaceutical rights and drug safety",
        category="pharmaceutical",
        urgency="medium",
        constitutional=["Article 21", "Article 47"],
        legal=["Drugs and Cosmetics Act", "Pharmacy Act"],
        timeline="7-14 days",
        immediate=["Keep the medicine strip and bill", "Report side effects to the doctor"],
        remedies=["Complain to the State Drug Controller", "Report overpricing to NPPA"],
        subject="medicine",
    ),
    IssueType(
        id="rural_healthcare",
        name="Rural Healthcare",
        description="Healthcare services in rural and remote areas",
        category="rural",
        urgency="medium",
        constitutional=["Article 21", "Article 14"],
        legal=["National Rural Health Mission", CEA],
        timeline="60-120 days",
        immediate=["Contact the ASHA worker or the primary health centre"],
        remedies=["Complain to the Block Medical Officer", "Raise the issue in the Gram Sabha"],
        subject="rural healthcare",
    ),
]

LEGAL_OPTIONS = {
    "medical_negligence": {
        "medical_council": legal_option("Complaint to the State Medical Council", "90-180 days", 55, "None", "Medium"),
        "consumer": legal_option("Consumer complaint for compensation", "180-365 days", 70, "Medium", "High"),
        "criminal": legal_option("Criminal complaint for gross negligence", "90-365 days", 40, "Medium", "High"),
    },
    "insurance_rights": {
        "grievance": legal_option("Insurer grievance redressal", "14-15 days", 60, "None", "Low"),
        "ombudsman": legal_option("Insurance Ombudsman", "30-90 days", 75, "None", "Low"),
    },
    "default": {
        "grievance": legal_option("Hospital grievance cell", "7-14 days", 55, "None", "Low"),
        "cmo": legal_option("Complaint to the Chief Medical Officer", "14-30 days", 65, "None", "Low"),
        "shrc": legal_option("Complaint to the State Human Rights Commission", "30-90 days", 60, "None", "Medium"),
    },
}

RESOURCES = {
    "services": [
        {"name": "Ayushman Bharat PM-JAY", "website": "https://pmjay.gov.in", "type": "insurance"},
        {"name": "Tele-MANAS", "website": "https://telemanas.mohfw.gov.in", "type": "mental_health"},
        {"name": "Insurance Ombudsman", "website": "https://www.cioins.co.in", "type": "ombudsman"},
    ],
}

CONTACTS = {
    "national": [
        AMBULANCE,
        NATIONAL_EMERGENCY,
        {"name": "Tele-MANAS", "phone": "14416", "type": "mental_health"},
        NALSA,
    ],
}

STATISTICS = {
    "totalComplaints": 150000,
    "successRate": 60,
    "averageResolutionTime": 50,
    "categories": {
        "negligence": 40000,
        "insurance": 50000,
        "emergency": 30000,
        "other": 30000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "insurance_rights",
        "title": "Cashless Claim Approved",
        "description": "Insurance Ombudsman directed payment of a rejected hospitalisation claim",
        "outcome": "success",
        "compensation": 185000,
        "date": "2023-12-11",
        "timeline": "40 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Right to health",
        "description": "The right to life includes the right to health and emergency medical care",
    },
    "article47": {
        "article": "Article 47",
        "title": "Public health",
        "description": "The State shall regard the improvement of public health as a primary duty",
    },
    "landmark": {
        "case": "Parmanand Katara v. Union of India (1989)",
        "description": "Every doctor must give immediate aid to save life",
    },
}

LAWS = [
    {"name": "Clinical Establishments Act, 2010", "description": "Registration and standards for hospitals and clinics", "year": 2010},
    {"name": "Mental Healthcare Act, 2017", "description": "Rights of persons with mental illness", "year": 2017},
    {"name": "Drugs and Cosmetics Act, 1940", "description": "Quality of drugs and cosmetics", "year": 1940},
]

TEMPLATES = complaint_letters([
    {
        "type": "negligence",
        "title": "Medical Negligence Complaint",
        "title_hi": "चिकित्सीय लापरवाही की शिकायत",
        "authority": "Registrar, State Medical Council",
        "authority_hi": "रजिस्ट्रार, राज्य चिकित्सा परिषद",
        "subject": "Complaint of medical negligence against Dr. [Name]",
        "subject_hi": "डॉ. [नाम] के विरुद्ध चिकित्सीय लापरवाही की शिकायत",
        "law": "the National Medical Commission Act 2019",
    },
])

EXTRAS = {
    "governmentHealthSchemes": [
        {"name": "Ayushman Bharat PM-JAY", "benefit": "Rs 5 lakh cover per family per year"},
        {"name": "Janani Suraksha Yojana", "benefit": "Support for institutional delivery"},
        {"name": "Pradhan Mantri Bhartiya Janaushadhi Pariyojana", "benefit": "Low-cost generic medicines"},
    ],
}

assistant = SectorAssistant(
    slug="healthcare",
    title="Healthcare Rights Assistant",
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
