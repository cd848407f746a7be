"""
samvidhan/assistants/gov_services.py
Help with government document services (Aadhaar, passport, PAN, licence, voter ID)
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import complaint_letters, legal_option

SERVICE_STAGES = {
    "application": "1-7 days",
    "verification": "7-30 days",
    "processing": "15-45 days",
    "grievance": "30-60 days",
}

ISSUE_TYPES = [
    IssueType(
        id="aadhaar",
        name="Aadhaar Services",
        description="Unique identity card and related services",
        category="identity",
        urgency="normal",
        constitutional=["Article 14", "Article 21"],
        legal=["Aadhaar Act 2016"],
        timeline="30-90 days",
        immediate=[
            "Book an appointment at an Aadhaar Seva Kendra",
            "Carry original proof of identity and address",
            "Keep the update request number (URN)",
        ],
        remedies=[
            "Call UIDAI on 1947",
            "Raise a grievance on the UIDAI portal",
        ],
        stages=dict(SERVICE_STAGES),
        subject="Aadhaar",
    ),
    IssueType(
        id="passport",
        name="Passport Services",
        description="International travel document and related services",
        category="travel",
        urgency="normal",
        constitutional=["Article 14", "Article 21"],
        legal=["Passports Act 1967"],
        timeline="30-45 days",
        immediate=[
            "Apply on Passport Seva and book an appointment",
            "Keep the file number for tracking",
            "Be available for police verification",
        ],
        remedies=[
            "Raise a grievance on Passport Seva",
            "Appeal a refusal to the Chief Passport Officer",
        ],
        stages={
            "application": "1-3 days",
            "appointment": "3-15 days",
            "police_verification": "7-21 days",
            "dispatch": "3-7 days",
        },
        subject="passport",
    ),
    IssueType(
        id="pan",
        name="PAN Services",
        description="Permanent Account Number for financial transactions",
        category="financial",
        urgency="normal",
        constitutional=["Article 14", "Article 19(1)(g)"],
        legal=["Income Tax Act 1961"],
        timeline="15-30 days",
        immediate=[
            "Apply online through NSDL or UTIITSL",
            "Link PAN with Aadhaar",
        ],
        remedies=["Raise a grievance with the Income Tax Department"],
        stages=dict(SERVICE_STAGES),
        subject="PAN",
    ),
    IssueType(
        id="driving_license",
        name="Driving License Services",
        description="Motor vehicle driving license and related services",
        category="transport",
        urgency="normal",
        constitutional=["Article 14", "Article 19(1)(g)"],
        legal=["Motor Vehicles Act 1988"],
        timeline="60-90 days",
        immediate=[
            "Apply on the Parivahan Sewa portal",
            "Book the learner's licence test",
        ],
        remedies=[
            "Complain to the Regional Transport Officer",
            "Appeal a refusal to the appellate authority",
        ],
        subject="driving licence",
    ),
    IssueType(
        id="voter_id",
        name="Voter ID Services",
        description="Electoral photo identity card and related services",
        category="electoral",
        urgency="normal",
        constitutional=["Article 14", "Article 19", "Article 326"],
        legal=["Representation of the People Act 1950"],
        timeline="30-60 days",
        immediate=[
            "Apply with Form 6 on the Voters' Service Portal",
            "Track the application with the reference number",
        ],
        remedies=[
            "Contact the Booth Level Officer",
            "Appeal to the Electoral Registration Officer",
        ],
        subject="voter ID",
    ),
]

LEGAL_OPTIONS = {
    "default": {
        "grievance": legal_option("Grievance with the issuing department", "7-30 days", 70, "None", "Low"),
        "cpgrams": legal_option("Complaint on CPGRAMS public grievance portal", "30-60 days", 65, "None", "Low"),
        "rti": legal_option("RTI application on the status of the file", "30 days", 80, "Low", "Low"),
        "writ": legal_option("Writ petition for unreasonable delay", "90-180 days", 60, "High", "High"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "UIDAI", "website": "https://uidai.gov.in", "type": "aadhaar"},
        {"name": "Passport Seva", "website": "https://www.passportindia.gov.in", "type": "passport"},
        {"name": "Parivahan Sewa", "website": "https://parivahan.gov.in", "type": "transport"},
        {"name": "Voters' Service Portal", "website": "https://voters.eci.gov.in", "type": "electoral"},
        {"name": "CPGRAMS", "website": "https://pgportal.gov.in", "type": "grievance"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "UIDAI Helpline", "phone": "1947", "type": "aadhaar"},
        {"name": "Passport Seva Helpline", "phone": "1800-258-1800", "type": "passport"},
        {"name": "Voter Helpline", "phone": "1950", "type": "electoral"},
    ],
}

STATISTICS = {
    "totalApplications": 2500000,
    "successRate": 88,
    "averageProcessingTime": 30,
    "categories": {
        "aadhaar": 1000000,
        "passport": 600000,
        "pan": 450000,
        "driving_license": 300000,
        "voter_id": 150000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "passport",
        "title": "Pending Passport Dispatched",
        "description": "Passport dispatched within a week of a CPGRAMS grievance",
        "outcome": "success",
        "date": "2023-12-05",
        "timeline": "7 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Government services must be delivered without arbitrary discrimination",
    },
    "article21": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "Includes the right to travel abroad and to a legal identity",
    },
    "landmark": {
        "case": "Maneka Gandhi v. Union of India (1978)",
        "description": "Passport impounding must follow fair procedure",
    },
}

LAWS = [
    {"name": "Aadhaar Act, 2016", "description": "Targeted delivery of subsidies using Aadhaar", "year": 2016},
    {"name": "Passports Act, 1967", "description": "Issue and impounding of passports", "year": 1967},
    {"name": "Motor Vehicles Act, 1988", "description": "Driving licences and vehicle registration", "year": 1988},
]

TEMPLATES = complaint_letters([
    {
        "type": "delay",
        "title": "Grievance for Delay in Service",
        "title_hi": "सेवा में देरी की शिकायत",
        "authority": "Grievance Officer, [Department]",
        "authority_hi": "शिकायत अधिकारी, [विभाग]",
        "subject": "Delay in processing application no. [Number]",
        "subject_hi": "आवेदन संख्या [संख्या] के निपटान में देरी",
        "law": "the applicable citizen's charter",
    },
])

assistant = SectorAssistant(
    slug="gov-services",
    title="Government Services Assistant",
    type_field="serviceType",
    issue_types=ISSUE_TYPES,
    legal_options=LEGAL_OPTIONS,
    resources=RESOURCES,
    contacts=CONTACTS,
    statistics=STATISTICS,
    recent_cases=RECENT_CASES,
    constitutional_basis=CONSTITUTIONAL_BASIS,
    laws=LAWS,
    templates=TEMPLATES,
)
