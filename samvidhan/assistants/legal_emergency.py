"""
samvidhan/assistants/legal_emergency.py
Emergency legal guidance: arrest, search, detention, harassment, property
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import (
    NALSA, NATIONAL_EMERGENCY, POLICE, STATE_LEGAL_AID, WOMEN_HELPLINE,
    complaint_letters, legal_option,
)

ISSUE_TYPES = [
    IssueType(
        id="arrest",
        name="Police Arrest",
        description="When you or someone you know is arrested by police",
        category="criminal",
        urgency="high",
        constitutional=["Article 22", "Article 21"],
        legal=["CrPC Section 41", "CrPC Section 50", "CrPC Section 57"],
        timeline="Immediate action required",
        immediate=[
            "Stay calm and do not resist arrest",
            "Ask for the grounds of arrest",
            "Ask to inform a family member or friend",
            "Ask for a lawyer before answering questions",
        ],
        remedies=[
            "Apply for bail before the magistrate",
            "File a habeas corpus petition if not produced within 24 hours",
            "Complain to the State Human Rights Commission",
        ],
        milestones={
            "0-24 hours": "Production before a magistrate",
            "1-7 days": "Bail hearing",
            "7-30 days": "Investigation and charge sheet",
        },
        stages={
            "contact_lawyer": "0-1 days",
            "magistrate_production": "0-1 days",
            "bail_application": "1-7 days",
            "charge_sheet": "60-90 days",
        },
        subject="arrest",
    ),
    IssueType(
        id="search",
        name="Police Search",
        description="When police are searching your property or person",
        category="criminal",
        urgency="medium",
        constitutional=["Article 21", "Article 19(1)(d)"],
        legal=["CrPC Section 93", "CrPC Section 100", "CrPC Section 165"],
        timeline="24-48 hours",
        immediate=[
            "Ask to see the search warrant",
            "Ask for two independent witnesses from the locality",
            "Watch the search and note every item taken",
            "Ask for a copy of the seizure memo",
        ],
        remedies=[
            "Complain to the Superintendent of Police about an illegal search",
            "Apply to the magistrate for return of seized property",
            "File a writ petition in the High Court",
        ],
        milestones={
            "0-1 days": "Collect the seizure memo",
            "1-7 days": "Written complaint to senior officers",
            "7-30 days": "Application for return of property",
        },
        subject="search",
    ),
    IssueType(
        id="detention",
        name="Illegal Detention",
        description="When someone is detained without proper legal process",
        category="criminal",
        urgency="high",
        constitutional=["Article 22", "Article 21"],
        legal=["CrPC Section 57", "CrPC Section 167"],
        timeline="Immediate action required",
        immediate=[
            "Find out where the person is held",
            "Contact a lawyer or legal aid immediately",
            "Note the names of officers involved",
        ],
        remedies=[
            "File a habeas corpus petition in the High Court",
            "Complain to the National Human Rights Commission",
            "Seek compensation for illegal detention",
        ],
        milestones={
            "0-24 hours": "Demand production before a magistrate",
            "1-3 days": "Habeas corpus petition",
        },
        stages={
            "contact_lawyer": "0-1 days",
            "habeas_corpus": "1-3 days",
            "hearing": "3-14 days",
        },
        subject="detention",
    ),
    IssueType(
        id="harassment",
        name="Harassment Cases",
        description="When facing harassment or discrimination",
        category="civil",
        urgency="high",
        constitutional=["Article 21", "Article 14"],
        legal=["IPC Section 354", "IPC Section 506", "SC/ST (Prevention of Atrocities) Act"],
        timeline="Immediate action required",
        immediate=[
            "Move to a safe place",
            "Record dates, messages and witnesses",
            "Call 112 if you are in danger",
        ],
        remedies=[
            "File an FIR at the nearest police station",
            "Approach the magistrate under Section 156(3) if police refuse the FIR",
            "Seek a protection order",
        ],
        subject="harassment",
    ),
    IssueType(
        id="property",
        name="Property Disputes",
        description="When your property rights are violated",
        category="civil",
        urgency="medium",
        constitutional=["Article 300A", "Article 19(1)(f)"],
        legal=["Specific Relief Act", "Transfer of Property Act"],
        timeline="7-30 days",
        immediate=[
            "Collect title documents and tax receipts",
            "Photograph the property and any encroachment",
            "Send a written objection to the other party",
        ],
        remedies=[
            "File a civil suit for injunction",
            "Complain to the police for criminal trespass",
            "Seek mediation through the Legal Services Authority",
        ],
        subject="property",
    ),
]

LEGAL_OPTIONS = {
    "arrest": {
        "bail": legal_option("Apply for regular or anticipatory bail", "1-7 days", 70, "Medium", "Medium"),
        "legal_aid": legal_option("Free lawyer through the Legal Services Authority", "0-1 days", 80, "None", "Low"),
        "habeas_corpus": legal_option("Habeas corpus petition in the High Court", "1-3 days", 75, "Medium", "Medium"),
    },
    "detention": {
        "habeas_corpus": legal_option("Habeas corpus petition in the High Court", "1-3 days", 80, "Medium", "Medium"),
        "nhrc": legal_option("Complaint to the National Human Rights Commission", "30-60 days", 60, "None", "Low"),
    },
    "default": {
        "police_complaint": legal_option("Written complaint or FIR at the police station", "0-7 days", 65, "None", "Low"),
        "magistrate": legal_option("Complaint before the magistrate", "7-30 days", 70, "Low", "Medium"),
        "civil_suit": legal_option("Civil suit for injunction or damages", "90-365 days", 60, "High", "High"),
    },
}

RESOURCES = {
    "legalAid": [
        {"name": "National Legal Services Authority", "website": "https://nalsa.gov.in", "type": "legal_aid"},
        {"name": "District Legal Services Authority", "website": "https://nalsa.gov.in/lsams", "type": "legal_aid"},
    ],
    "humanRights": [
        {"name": "National Human Rights Commission", "website": "https://nhrc.nic.in", "type": "commission"},
    ],
}

CONTACTS = {
    "national": [NATIONAL_EMERGENCY, POLICE, NALSA, WOMEN_HELPLINE],
    **STATE_LEGAL_AID,
}

STATISTICS = {
    "totalCases": 250000,
    "successRate": 68,
    "averageResponseTime": 2,
    "legalAidProvided": 120000,
    "categories": {
        "arrest": 90000,
        "search": 40000,
        "detention": 50000,
        "harassment": 45000,
        "property": 25000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "arrest",
        "title": "Bail Secured Within 24 Hours",
        "description": "Legal aid lawyer secured bail after production before the magistrate",
        "outcome": "success",
        "date": "2023-12-18",
        "timeline": "1 day",
    },
    {
        "id": 2,
        "type": "detention",
        "title": "Habeas Corpus Petition Allowed",
        "description": "High Court ordered release after detention beyond 24 hours",
        "outcome": "success",
        "date": "2023-12-10",
        "timeline": "3 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "No person shall be deprived of life or personal liberty except according to procedure established by law",
    },
    "article22": {
        "article": "Article 22",
        "title": "Protection against arrest and detention",
        "description": "Right to be told the grounds of arrest, to consult a lawyer and to be produced before a magistrate within 24 hours",
    },
    "landmark": {
        "case": "D.K. Basu v. State of West Bengal (1997)",
        "description": "Laid down mandatory guidelines for every arrest and detention",
    },
}

LAWS = [
    {"name": "Code of Criminal Procedure, 1973", "description": "Procedure for arrest, search, bail and trial", "year": 1973},
    {"name": "Legal Services Authorities Act, 1987", "description": "Free legal aid for eligible persons", "year": 1987},
    {"name": "Protection of Human Rights Act, 1993", "description": "Human rights commissions and courts", "year": 1993},
]

TEMPLATES = complaint_letters([
    {
        "type": "arrest",
        "title": "Complaint against Illegal Arrest",
        "title_hi": "अवैध गिरफ्तारी के विरुद्ध शिकायत",
        "authority": "Superintendent of Police",
        "authority_hi": "पुलिस अधीक्षक",
        "subject": "Complaint regarding arrest without following D.K. Basu guidelines",
        "subject_hi": "डी.के. बसु दिशानिर्देशों का पालन किए बिना गिरफ्तारी के संबंध में शिकायत",
        "law": "Article 22 and CrPC Section 41",
    },
    {
        "type": "harassment",
        "title": "Complaint of Harassment",
        "title_hi": "उत्पीड़न की शिकायत",
        "authority": "Station House Officer",
        "authority_hi": "थाना प्रभारी",
        "subject": "Request to register an FIR for harassment",
        "subject_hi": "उत्पीड़न के लिए प्राथमिकी दर्ज करने का अनुरोध",
        "law": "CrPC Section 154",
    },
])

EXTRAS = {
    "hotlines": [
        {**NATIONAL_EMERGENCY, "is247": True},
        {**POLICE, "is247": True},
        {**NALSA, "is247": False},
        {**WOMEN_HELPLINE, "is247": True},
    ],
    "legalAid": RESOURCES["legalAid"],
}

assistant = SectorAssistant(
    slug="legal-emergency",
    title="Legal Emergency Assistant",
    type_field="emergencyType",
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
