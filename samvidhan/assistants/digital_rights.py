"""
samvidhan/assistants/digital_rights.py
Digital rights: privacy, online harassment, cyber crime and platform accountability
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import CYBER_CRIME, NALSA, WOMEN_HELPLINE, complaint_letters, legal_option

IT_ACT = "IT Act 2000"

ISSUE_TYPES = [
    IssueType(
        id="data_privacy",
        name="Data Privacy Rights",
        description="Protection of personal data and privacy in digital world",
        category="privacy",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=[IT_ACT, "Digital Personal Data Protection Act 2023"],
        timeline="30-60 days",
        immediate=[
            "Change passwords and enable two-factor authentication",
            "Record what data was exposed and where",
            "Ask the company for details of the breach in writing",
        ],
        remedies=[
            "Complain to the company's grievance officer",
            "Report to CERT-In",
            "Claim compensation for failure to protect data",
        ],
        subject="data privacy",
    ),
    IssueType(
        id="online_harassment",
        name="Online Harassment Protection",
        description="Protection against online harassment and cyberbullying",
        category="safety",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=[IT_ACT, "Sexual Harassment Act"],
        timeline="30-60 days",
        immediate=[
            "Take screenshots with date and URL",
            "Block and report the account on the platform",
            "Do not delete the messages",
        ],
        remedies=[
            "File a report on cybercrime.gov.in",
            "File an FIR under IT Act Section 67 and IPC Section 354D",
        ],
        milestones={
            "0-1 days": "Preserve evidence and report on the platform",
            "1-3 days": "Cyber crime portal complaint",
            "7-30 days": "Investigation by the cyber cell",
        },
        subject="online harassment",
    ),
    IssueType(
        id="cyber_crime",
        name="Cyber Crime Protection",
        description="Protection against cyber crimes and digital threats",
        category="security",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=[IT_ACT, "Cyber Crime Laws"],
        timeline="7-14 days",
        immediate=[
            "Call 1930 for financial cyber fraud",
            "Disconnect affected devices from the network",
            "Preserve logs, emails and transaction references",
        ],
        remedies=[
            "File a complaint on the National Cyber Crime Reporting Portal",
            "File an FIR with the cyber police station",
        ],
        stages={
            "report": "0-1 days",
            "complaint": "1-3 days",
            "investigation": "7-30 days",
            "resolution": "30-90 days",
        },
        subject="cyber crime",
    ),
    IssueType(
        id="digital_safety",
        name="Digital Safety",
        description="General digital safety and security practices",
        category="safety",
        urgency="medium",
        constitutional=["Article 21", "Article 14"],
        legal=[IT_ACT],
        timeline="14-30 days",
        immediate=[
            "Update devices and apps",
            "Review app permissions",
            "Use a password manager",
        ],
        remedies=["Report suspicious activity to CERT-In"],
        subject="digital safety",
    ),
    IssueType(
        id="internet_freedom",
        name="Internet Freedom",
        description="Protection of internet freedom and net neutrality",
        category="freedom",
        urgency="medium",
        constitutional=["Article 19(1)(a)", "Article 21"],
        legal=[IT_ACT, "Net Neutrality Rules"],
        timeline="30-60 days",
        immediate=[
            "Record the blocked URL or throttled service",
            "Ask the provider for the blocking order",
        ],
        remedies=[
            "Complain to TRAI about discriminatory traffic management",
            "Challenge arbitrary blocking in the High Court",
        ],
        subject="internet access",
    ),
    IssueType(
        id="intellectual_property",
        name="Intellectual Property Rights",
        description="Protection of intellectual property in digital world",
        category="property",
        urgency="medium",
        constitutional=["Article 19(1)(g)", "Article 21"],
        legal=["Copyright Act", IT_ACT],
        timeline="60-120 days",
        immediate=[
            "Collect proof of original authorship",
            "Send a takedown notice to the platform",
        ],
        remedies=[
            "File a copyright infringement suit",
            "Seek an injunction against the infringer",
        ],
        subject="intellectual property",
    ),
    IssueType(
        id="access_rights",
        name="Digital Access Rights",
        description="Protection of digital accessibility and access rights",
        category="accessibility",
        urgency="medium",
        constitutional=["Article 14", "Article 21"],
        legal=["Rights of Persons with Disabilities Act 2016", IT_ACT],
        timeline="30-60 days",
        immediate=[
            "Document the accessibility barrier",
            "Write to the service provider",
        ],
        remedies=["Complain to the Chief Commissioner for Persons with Disabilities"],
        subject="digital access",
    ),
    IssueType(
        id="platform_accountability",
        name="Platform Accountability",
        description="Ensuring platform accountability and transparency",
        category="accountability",
        urgency="medium",
        constitutional=["Article 19(1)(a)", "Article 21"],
        legal=[IT_ACT, "IT (Intermediary Guidelines) Rules 2021"],
        timeline="30-60 days",
        immediate=[
            "Complain to the platform's grievance officer",
            "Keep the ticket number and response",
        ],
        remedies=["Appeal to the Grievance Appellate Committee"],
        subject="platform",
    ),
]

LEGAL_OPTIONS = {
    "default": {
        "platform": legal_option("Complaint to the platform's grievance officer", "1-15 days", 60, "None", "Low"),
        "cyber_portal": legal_option("Report on the National Cyber Crime Reporting Portal", "7-30 days", 65, "None", "Low"),
        "adjudicating_officer": legal_option("Compensation claim before the IT adjudicating officer", "60-180 days", 55, "Medium", "High"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "National Cyber Crime Reporting Portal", "website": "https://cybercrime.gov.in", "type": "reporting"},
        {"name": "CERT-In", "website": "https://www.cert-in.org.in", "type": "security"},
    ],
}

CONTACTS = {
    "national": [CYBER_CRIME, WOMEN_HELPLINE, NALSA],
}

STATISTICS = {
    "totalCases": 320000,
    "successRate": 58,
    "averageResolutionTime": 40,
    "categories": {
        "cyber_crime": 150000,
        "online_harassment": 80000,
        "data_privacy": 50000,
        "other": 40000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "online_harassment",
        "title": "Fake Profile Removed",
        "description": "Platform removed an impersonating profile after a cyber cell notice",
        "outcome": "success",
        "date": "2023-12-14",
        "timeline": "6 days",
    },
    {
        "id": 2,
        "type": "cyber_crime",
        "title": "UPI Fraud Amount Frozen",
        "description": "Funds frozen in the beneficiary account after a 1930 report",
        "outcome": "success",
        "date": "2023-12-02",
        "timeline": "2 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Right to privacy",
        "description": "Privacy is part of the right to life and personal liberty",
    },
    "article19": {
        "article": "Article 19(1)(a)",
        "title": "Freedom of speech and expression",
        "description": "Extends to expression over the internet",
    },
    "landmark": {
        "case": "Justice K.S. Puttaswamy v. Union of India (2017)",
        "description": "Recognised privacy as a fundamental right",
    },
}

LAWS = [
    {"name": "Information Technology Act, 2000", "description": "Cyber offences, intermediaries and electronic records", "year": 2000},
    {"name": "Digital Personal Data Protection Act, 2023", "description": "Processing of personal data and rights of data principals", "year": 2023},
]

TEMPLATES = complaint_letters([
    {
        "type": "cyber_cell",
        "title": "Cyber Crime Complaint",
        "title_hi": "साइबर अपराध शिकायत",
        "authority": "Officer In-charge, Cyber Crime Police Station",
        "authority_hi": "प्रभारी अधिकारी, साइबर अपराध पुलिस थाना",
        "subject": "Complaint regarding [offence] committed online",
        "subject_hi": "ऑनलाइन किए गए [अपराध] के संबंध में शिकायत",
        "law": "the Information Technology Act 2000",
    },
])

EXTRAS = {
    "digitalLaws": LAWS,
    "cyberAuthorities": [
        {"name": "Indian Cyber Crime Coordination Centre", "website": "https://i4c.mha.gov.in"},
        {"name": "CERT-In", "website": "https://www.cert-in.org.in"},
        {"name": "Grievance Appellate Committee", "website": "https://gac.gov.in"},
    ],
}

assistant = SectorAssistant(
    slug="digital-rights",
    title="Digital Rights Assistant",
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
