"""
samvidhan/assistants/consumer.py
Consumer complaint guidance under the Consumer Protection Act, 2019
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import CONSUMER_HELPLINE, NALSA, STATE_LEGAL_AID, complaint_letters, legal_option

CPA = "Consumer Protection Act 2019"

ISSUE_TYPES = [
    IssueType(
        id="product",
        name="Product Issues",
        description="Defective products, quality issues, warranty problems",
        category="goods",
        urgency="medium",
        constitutional=["Article 14", "Article 21"],
        legal=[CPA, "Sale of Goods Act 1930"],
        timeline="30-60 days",
        immediate=[
            "Keep the invoice, warranty card and packaging",
            "Photograph the defect",
            "Write to the seller asking for repair, replacement or refund",
        ],
        remedies=[
            "Call the National Consumer Helpline",
            "File a complaint on e-Daakhil",
            "Claim compensation before the District Commission",
        ],
        milestones={
            "0-7 days": "Written notice to seller",
            "15-30 days": "Consumer helpline mediation",
            "30-60 days": "District Commission complaint",
        },
        subject="defective product",
    ),
    IssueType(
        id="service",
        name="Service Problems",
        description="Poor service quality, delivery issues, billing problems",
        category="services",
        urgency="medium",
        constitutional=["Article 14", "Article 21"],
        legal=[CPA],
        timeline="30-45 days",
        immediate=[
            "Note the dates of service failures",
            "Keep bills and correspondence",
            "Raise a ticket with the provider",
        ],
        remedies=[
            "Escalate to the provider's grievance officer",
            "File a complaint for deficiency in service",
        ],
        subject="service",
    ),
    IssueType(
        id="financial",
        name="Banking & Finance",
        description="Bank account issues, loan problems, card fraud",
        category="financial",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=[CPA, "Banking Regulation Act 1949"],
        timeline="15-30 days",
        immediate=[
            "Inform the bank in writing",
            "Download relevant statements",
            "Report fraud on 1930",
        ],
        remedies=[
            "Complain to the RBI ombudsman",
            "File a consumer complaint for deficiency in banking service",
        ],
        subject="financial service",
    ),
    IssueType(
        id="digital",
        name="Digital Services",
        description="E-commerce, social media, online services",
        category="digital",
        urgency="medium",
        constitutional=["Article 14", "Article 21"],
        legal=[CPA, "Consumer Protection (E-Commerce) Rules 2020"],
        timeline="30-45 days",
        immediate=[
            "Screenshot the order, listing and chat history",
            "Raise a complaint with the platform's grievance officer",
            "Keep the payment reference",
        ],
        remedies=[
            "Escalate through the National Consumer Helpline",
            "File a complaint on e-Daakhil",
        ],
        subject="online purchase",
    ),
    IssueType(
        id="real_estate",
        name="Real Estate",
        description="Property issues, builder problems, RERA violations",
        category="housing",
        urgency="high",
        constitutional=["Article 21", "Article 300A"],
        legal=["Real Estate (Regulation and Development) Act 2016", CPA],
        timeline="60-90 days",
        immediate=[
            "Collect the builder-buyer agreement and payment receipts",
            "Check the project's RERA registration",
            "Send a legal notice for delay or defects",
        ],
        remedies=[
            "File a complaint before the state RERA authority",
            "File a consumer complaint for refund with interest",
        ],
        stages={
            "notice": "7-15 days",
            "complaint": "15-30 days",
            "hearing": "60-120 days",
            "order": "90-180 days",
        },
        subject="real estate",
    ),
]

LEGAL_OPTIONS = {
    "real_estate": {
        "rera": legal_option("Complaint before the state RERA authority", "60-120 days", 75, "Low", "Medium"),
        "commission": legal_option("Consumer complaint for refund with interest", "90-180 days", 80, "Medium", "High"),
    },
    "default": {
        "helpline": legal_option("Mediation through the National Consumer Helpline", "15-30 days", 60, "None", "Low"),
        "district_commission": legal_option("Complaint before the District Consumer Commission", "90-150 days", 80, "Low", "Medium"),
        "state_commission": legal_option("Appeal before the State Commission", "180-365 days", 70, "Medium", "High"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "e-Daakhil", "website": "https://edaakhil.nic.in", "type": "filing"},
        {"name": "National Consumer Helpline", "website": "https://consumerhelpline.gov.in", "type": "helpline"},
    ],
    "commissions": [
        {"name": "National Consumer Disputes Redressal Commission", "website": "https://ncdrc.nic.in", "type": "commission"},
    ],
}

CONTACTS = {
    "national": [CONSUMER_HELPLINE, NALSA],
    **STATE_LEGAL_AID,
}

STATISTICS = {
    "totalComplaints": 500000,
    "successRate": 75,
    "averageResolutionTime": 45,
    "compensation": 12000000,
    "categories": {
        "product": 180000,
        "service": 150000,
        "financial": 80000,
        "digital": 60000,
        "real_estate": 30000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "product",
        "title": "Refund for Defective Refrigerator",
        "description": "District Commission ordered a full refund with compensation",
        "outcome": "success",
        "compensation": 15000,
        "date": "2023-12-12",
        "timeline": "75 days",
    },
    {
        "id": 2,
        "type": "real_estate",
        "title": "Interest on Delayed Possession",
        "description": "Builder directed to pay interest for a two-year delay",
        "outcome": "success",
        "compensation": 350000,
        "date": "2023-11-28",
        "timeline": "8 months",
    },
]

CONSTITUTIONAL_BASIS = {
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Consumers are entitled to equal and fair treatment",
    },
    "article21": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "Includes the right to safe goods and services",
    },
}

LAWS = [
    {"name": "Consumer Protection Act, 2019", "description": "Consumer rights, commissions and product liability", "year": 2019},
    {"name": "Real Estate (Regulation and Development) Act, 2016", "description": "Regulates real estate projects and builders", "year": 2016},
    {"name": "Legal Metrology Act, 2009", "description": "Weights, measures and packaged commodity labelling", "year": 2009},
]

TEMPLATES = complaint_letters([
    {
        "type": "district_commission",
        "title": "Consumer Complaint",
        "title_hi": "उपभोक्ता शिकायत",
        "authority": "President, District Consumer Disputes Redressal Commission",
        "authority_hi": "अध्यक्ष, जिला उपभोक्ता विवाद प्रतितोष आयोग",
        "subject": "Complaint against [Seller] for defective goods / deficiency in service",
        "subject_hi": "[विक्रेता] के विरुद्ध दोषपूर्ण वस्तु / सेवा में कमी की शिकायत",
        "law": "Section 35 of the Consumer Protection Act 2019",
    },
])

assistant = SectorAssistant(
    slug="consumer",
    title="Consumer Rights Assistant",
    type_field="complaintType",
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
