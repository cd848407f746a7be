"""
samvidhan/assistants/journalism.py
Press freedom and citizen journalism; also served as /citizen-journalism
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, POLICE, complaint_letters, legal_option

SPEECH = ["Article 19(1)(a)", "Article 14", "Article 21"]

# id, name, description, category, urgency, constitutional, legal, timeline, immediate, remedies
_ISSUES = [
    ("press_freedom", "Press Freedom", "Freedom of press and media in India",
     "rights", "high", ["Article 19(1)(a)", "Article 19(1)(b)", "Article 14"], ["Press Council Act", "Constitutional Law"], "30-60 days",
     ["Document the restriction or threat", "Inform your editor and press association"],
     ["Complain to the Press Council of India", "Challenge prior restraint in the High Court"]),
    ("media_rights", "Media Rights", "Rights and protections for media professionals",
     "rights", "medium", SPEECH, ["Working Journalists Act", "Constitutional Law"], "30-60 days",
     ["Keep appointment and accreditation records"],
     ["Approach the Labour Commissioner for wage disputes"]),
    ("journalist_protection", "Journalist Protection", "Protection of journalists and media workers",
     "rights", "high", SPEECH, ["IPC Section 506", "Constitutional Law"], "30-60 days",
     ["Report threats to the police in writing", "Share your location with colleagues while on assignment"],
     ["Seek police protection", "Approach the National Human Rights Commission"]),
    ("citizen_journalism", "Citizen Journalism", "Rights and protections for citizen journalists",
     "community", "medium", SPEECH, ["IT Act 2000", "Constitutional Law"], "30-60 days",
     ["Verify facts before publishing", "Keep originals of photos and videos"],
     ["Contest takedown orders before the Grievance Appellate Committee"]),
    ("content_creation", "Content Creation", "Rights and protections for content creators",
     "digital", "medium", SPEECH, ["Copyright Act", "Digital Media Laws"], "30-60 days",
     ["Register copyright for important works"],
     ["Send takedown notices for copied content"]),
    ("media_ethics", "Media Ethics", "Ethical standards and practices in media",
     "ethics", "medium", SPEECH, ["Norms of Journalistic Conduct", "Constitutional Law"], "30-60 days",
     ["Publish corrections promptly"],
     ["Complain to the News Broadcasting Standards Authority"]),
    ("whistleblowing", "Whistleblowing Protection", "Protection for whistleblowers and corruption reporters",
     "rights", "high", SPEECH, ["Whistle Blowers Protection Act 2014", "Constitutional Law"], "30-60 days",
     ["Keep copies of evidence in a safe place", "Use the official disclosure channel"],
     ["Complain to the Central Vigilance Commission"]),
    ("community_media", "Community Media", "Community-based media and local journalism",
     "community", "medium", SPEECH, ["Community Radio Policy", "Constitutional Law"], "30-60 days",
     ["Apply for a community radio licence"],
     ["Appeal licence refusals to the Ministry of Information and Broadcasting"]),
]

ISSUE_TYPES = [IssueType(*row) for row in _ISSUES]

LEGAL_OPTIONS = {
    "journalist_protection": {
        "police": legal_option("Written complaint and request for protection", "1-7 days", 60, "None", "Low"),
        "nhrc": legal_option("Complaint to the National Human Rights Commission", "30-90 days", 55, "None", "Medium"),
    },
    "default": {
        "press_council": legal_option("Complaint to the Press Council of India", "60-120 days", 60, "None", "Medium"),
        "writ": legal_option("Writ petition against unlawful restriction", "90-180 days", 65, "High", "High"),
    },
}

RESOURCES = {
    "bodies": [
        {"name": "Press Council of India", "website": "https://presscouncil.nic.in", "type": "regulator"},
        {"name": "Press Information Bureau", "website": "https://pib.gov.in", "type": "accreditation"},
    ],
}

CONTACTS = {
    "national": [POLICE, NALSA],
}

STATISTICS = {
    "totalComplaints": 12000,
    "successRate": 52,
    "averageResolutionTime": 90,
    "categories": {
        "threats": 35,
        "censorship": 30,
        "defamation": 20,
        "other": 15,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "press_freedom",
        "title": "Internet Shutdown Order Reviewed",
        "description": "Court directed periodic review of a prolonged internet suspension",
        "outcome": "success",
        "date": "2023-10-18",
        "timeline": "3 months",
    },
]

CONSTITUTIONAL_BASIS = {
    "article19": {
        "article": "Article 19(1)(a)",
        "title": "Freedom of speech and expression",
        "description": "Includes freedom of the press",
    },
    "article19_2": {
        "article": "Article 19(2)",
        "title": "Reasonable restrictions",
        "description": "Restrictions must be reasonable and fall under the listed grounds",
    },
    "landmark": {
        "case": "Romesh Thappar v. State of Madras (1950)",
        "description": "Freedom of speech includes freedom of circulation",
    },
}

LAWS = [
    {"name": "Press Council Act, 1978", "description": "Preserves freedom of the press and standards", "year": 1978},
    {"name": "Whistle Blowers Protection Act, 2014", "description": "Protection for public interest disclosures", "year": 2014},
]

TEMPLATES = complaint_letters([
    {
        "type": "press_council",
        "title": "Complaint to Press Council",
        "title_hi": "भारतीय प्रेस परिषद को शिकायत",
        "authority": "Secretary, Press Council of India",
        "authority_hi": "सचिव, भारतीय प्रेस परिषद",
        "subject": "Complaint regarding interference with press freedom",
        "subject_hi": "प्रेस की स्वतंत्रता में हस्तक्षेप के संबंध में शिकायत",
        "law": "Section 13 of the Press Council Act 1978",
    },
])

EXTRAS = {
    "mediaOrganizations": [
        {"name": "Press Council of India", "website": "https://presscouncil.nic.in"},
        {"name": "Editors Guild of India", "website": "https://editorsguild.in"},
        {"name": "News Broadcasting and Digital Standards Authority", "website": "https://www.nbdanewdelhi.com"},
    ],
}

assistant = SectorAssistant(
    slug="journalism",
    title="Journalism and Press Freedom Assistant",
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
    aliases=("citizen-journalism",),
)
