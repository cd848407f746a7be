"""
samvidhan/assistants/womens_rights.py
Women's rights: safety, workplace, property, education and reproductive health
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import (
    NALSA, NATIONAL_EMERGENCY, STATE_LEGAL_AID, WOMEN_HELPLINE, complaint_letters, legal_option,
)

ISSUE_TYPES = [
    IssueType(
        id="domestic_violence",
        name="Domestic Violence",
        description="Protection against domestic violence and abuse",
        category="safety",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["Domestic Violence Act", "IPC Section 498A"],
        timeline="30-90 days",
        immediate=[
            "Call 112 or 181 if you are in danger",
            "Go to a safe place or a One Stop Centre",
            "Get injuries recorded by a doctor",
        ],
        remedies=[
            "Contact the Protection Officer for a Domestic Incident Report",
            "Apply to the magistrate for protection and residence orders",
            "File an FIR under Section 498A",
        ],
        milestones={
            "0-1 days": "Safety and medical examination",
            "1-7 days": "Domestic Incident Report",
            "3-60 days": "Protection order hearing",
        },
        stages={
            "safety": "0-1 days",
            "complaint": "1-7 days",
            "interim_order": "3-14 days",
            "final_order": "30-60 days",
        },
        subject="domestic violence",
    ),
    IssueType(
        id="sexual_harassment",
        name="Sexual Harassment",
        description="Protection against sexual harassment at workplace and public spaces",
        category="safety",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["Sexual Harassment of Women at Workplace Act", "IPC Section 354"],
        timeline="30-60 days",
        immediate=[
            "Write down each incident with date and witnesses",
            "Keep messages and emails",
            "Identify your Internal Committee",
        ],
        remedies=[
            "Complain to the Internal Committee within 3 months",
            "Approach the Local Committee if there is no Internal Committee",
            "File an FIR for criminal offences",
        ],
        subject="harassment",
    ),
    IssueType(
        id="workplace_discrimination",
        name="Workplace Discrimination",
        description="Protection against gender-based discrimination at workplace",
        category="employment",
        urgency="medium",
        constitutional=["Article 14", "Article 16"],
        legal=["Equal Remuneration Act", "Maternity Benefit Act"],
        timeline="30-60 days",
        immediate=[
            "Collect pay slips and appointment letters",
            "Compare pay with male colleagues in the same role",
        ],
        remedies=[
            "Complain to the Labour Commissioner",
            "Approach the National Commission for Women",
        ],
        subject="workplace discrimination",
    ),
    IssueType(
        id="property_rights",
        name="Property Rights",
        description="Protection of women's property and inheritance rights",
        category="property",
        urgency="medium",
        constitutional=["Article 14", "Article 300A"],
        legal=["Hindu Succession Act", "Protection of Women from Domestic Violence Act"],
        timeline="60-180 days",
        immediate=[
            "Collect family property documents",
            "Get a legal heir certificate",
        ],
        remedies=[
            "File a partition suit",
            "Claim the right of residence in the shared household",
        ],
        subject="property",
    ),
    IssueType(
        id="education_rights",
        name="Education Rights",
        description="Protection of girls' right to education",
        category="education",
        urgency="medium",
        constitutional=["Article 14", "Article 21A"],
        legal=["Right to Education Act", "Child Labor Laws"],
        timeline="30-60 days",
        immediate=["Approach the school management committee"],
        remedies=["Complain to the District Education Officer"],
        subject="education",
    ),
    IssueType(
        id="reproductive_rights",
        name="Reproductive Rights",
        description="Protection of women's reproductive health and autonomy",
        category="health",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["Medical Termination of Pregnancy Act", "PCPNDT Act"],
        timeline="30-60 days",
        immediate=["Consult a registered medical practitioner"],
        remedies=["Complain to the District Health Officer about denial of care"],
        subject="reproductive health",
    ),
]

LEGAL_OPTIONS = {
    "domestic_violence": {
        "protection_order": legal_option("Protection order under the Domestic Violence Act", "3-60 days", 80, "Low", "Medium"),
        "criminal": legal_option("FIR under IPC Section 498A", "1-7 days", 65, "None", "Medium"),
        "maintenance": legal_option("Maintenance under CrPC Section 125", "60-180 days", 75, "Low", "Medium"),
    },
    "default": {
        "commission": legal_option("Complaint to the National Commission for Women", "30-60 days", 65, "None", "Low"),
        "legal_aid": legal_option("Free lawyer through the Legal Services Authority", "7-14 days", 80, "None", "Low"),
    },
}

RESOURCES = {
    "support": [
        {"name": "One Stop Centre (Sakhi)", "website": "https://wcd.nic.in", "type": "shelter"},
        {"name": "National Commission for Women", "website": "https://ncw.nic.in", "type": "commission"},
        {"name": "SHe-Box", "website": "https://shebox.wcd.gov.in", "type": "workplace"},
    ],
}

CONTACTS = {
    "national": [WOMEN_HELPLINE, NATIONAL_EMERGENCY, NALSA],
    **STATE_LEGAL_AID,
}

STATISTICS = {
    "totalCases": 420000,
    "successRate": 62,
    "averageResolutionTime": 60,
    "categories": {
        "domestic_violence": 200000,
        "sexual_harassment": 90000,
        "workplace_discrimination": 50000,
        "property_rights": 80000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "domestic_violence",
        "title": "Residence Order Granted",
        "description": "Magistrate restrained the husband from dispossessing the complainant",
        "outcome": "success",
        "date": "2023-12-08",
        "timeline": "21 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Women are entitled to equal protection of the laws",
    },
    "article15": {
        "article": "Article 15(3)",
        "title": "Special provisions for women",
        "description": "The State may make special provisions for women and children",
    },
    "landmark": {
        "case": "Vishaka v. State of Rajasthan (1997)",
        "description": "Guidelines against sexual harassment at the workplace",
    },
}

LAWS = [
    {"name": "Protection of Women from Domestic Violence Act, 2005", "description": "Civil remedies against domestic violence", "year": 2005},
    {"name": "Sexual Harassment of Women at Workplace Act, 2013", "description": "Internal and local committees for workplace complaints", "year": 2013},
    {"name": "Hindu Succession (Amendment) Act, 2005", "description": "Equal coparcenary rights for daughters", "year": 2005},
]

TEMPLATES = complaint_letters([
    {
        "type": "internal_committee",
        "title": "Complaint to Internal Committee",
        "title_hi": "आंतरिक समिति को शिकायत",
        "authority": "Presiding Officer, Internal Committee",
        "authority_hi": "पीठासीन अधिकारी, आंतरिक समिति",
        "subject": "Complaint of sexual harassment at the workplace",
        "subject_hi": "कार्यस्थल पर यौन उत्पीड़न की शिकायत",
        "law": "Section 9 of the Sexual Harassment of Women at Workplace Act 2013",
    },
    {
        "type": "protection_officer",
        "title": "Domestic Incident Report Request",
        "title_hi": "घरेलू घटना रिपोर्ट हेतु अनुरोध",
        "authority": "Protection Officer",
        "authority_hi": "संरक्षण अधिकारी",
        "subject": "Request to record a Domestic Incident Report",
        "subject_hi": "घरेलू घटना रिपोर्ट दर्ज करने का अनुरोध",
        "law": "Section 12 of the Protection of Women from Domestic Violence Act 2005",
    },
])

EXTRAS = {
    "supportOrganizations": RESOURCES["support"],
    "emergencyContacts": [
        {**WOMEN_HELPLINE, "is247": True},
        {**NATIONAL_EMERGENCY, "is247": True},
        {"name": "NCW WhatsApp Helpline", "phone": "7217735372", "type": "women", "is247": True},
    ],
}

assistant = SectorAssistant(
    slug="womens-rights",
    title="Women's Rights Assistant",
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
