"""
samvidhan/assistants/library.py
Access to constitutional, legal and historical documents
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import complaint_letters, legal_option

ACCESS = ["Article 19(1)(a)", "Article 14", "Article 21"]

_DOCUMENTS = [
    ("constitutional_documents", "Constitutional Documents",
     "Access to constitutional documents and legal materials", "constitutional",
     ["Constituent Assembly Debates", "Constitution (as amended)"]),
    ("legal_documents", "Legal Documents",
     "Access to legal documents and jurisprudence materials", "legal",
     ["Bare Acts", "Gazette notifications"]),
    ("historical_documents", "Historical Documents",
     "Access to historical documents and archival materials", "historical",
     ["Public Records Act 1993", "National Archives"]),
    ("academic_documents", "Academic Documents",
     "Access to academic documents and scholarly materials", "academic",
     ["Shodhganga", "University Libraries"]),
    ("research_materials", "Research Materials",
     "Access to research materials and scholarly publications", "research",
     ["ONOS subscriptions", "Research Libraries"]),
    ("digital_library", "Digital Library",
     "Access to digital library resources and online materials", "digital",
     ["National Digital Library of India", "IT Act 2000"]),
    ("public_access", "Public Access",
     "Public access to library resources and information", "public",
     ["State Public Libraries Acts", "RTI Act 2005"]),
    ("copyright_protection", "Copyright Protection",
     "Copyright protection for library materials and resources", "copyright",
     ["Copyright Act 1957", "Section 52 fair dealing"]),
]

ISSUE_TYPES = [
    IssueType(
        id=issue_id,
        name=name,
        description=description,
        category=category,
        urgency="medium",
        constitutional=list(ACCESS),
        legal=legal,
        timeline="30-60 days",
        immediate=[
            "Search the National Digital Library of India",
            "Ask the librarian for an inter-library loan",
        ],
        remedies=[
            "File an RTI application for records held by a public authority",
            "Complain to the state library authority about denial of access",
        ],
        subject=name.lower(),
    )
    for issue_id, name, description, category, legal in _DOCUMENTS
]

LEGAL_OPTIONS = {
    "default": {
        "rti": legal_option("RTI application for public records", "30 days", 85, "Low", "Low"),
        "first_appeal": legal_option("First appeal under the RTI Act", "30-45 days", 70, "None", "Low"),
        "library_authority": legal_option("Complaint to the state library authority", "30-60 days", 60, "None", "Low"),
    },
}

RESOURCES = {
    "libraries": [
        {"name": "National Digital Library of India", "website": "https://ndl.iitkgp.ac.in", "type": "digital"},
        {"name": "India Code", "website": "https://www.indiacode.nic.in", "type": "legal"},
        {"name": "Abhilekh Patal (National Archives)", "website": "https://www.abhilekh-patal.in", "type": "archive"},
        {"name": "Lok Sabha Digital Library", "website": "https://eparlib.nic.in", "type": "parliamentary"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "National Library of India", "phone": "033-24791384", "type": "library"},
        {"name": "National Archives of India", "phone": "011-23384797", "type": "archive"},
    ],
}

STATISTICS = {
    "totalDocuments": 95000000,
    "digitalCollections": 12,
    "successRate": 80,
    "averageResponseTime": 15,
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "historical_documents",
        "title": "Archival Records Released",
        "description": "Declassified files made available after an RTI appeal",
        "outcome": "success",
        "date": "2023-11-08",
        "timeline": "45 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article19": {
        "article": "Article 19(1)(a)",
        "title": "Right to information",
        "description": "Freedom of expression includes the right to receive information",
    },
    "landmark": {
        "case": "State of U.P. v. Raj Narain (1975)",
        "description": "Citizens have a right to know about public acts",
    },
}

LAWS = [
    {"name": "Right to Information Act, 2005", "description": "Access to records held by public authorities", "year": 2005},
    {"name": "Public Records Act, 1993", "description": "Management and access to public records", "year": 1993},
    {"name": "Copyright Act, 1957", "description": "Fair dealing for research and library use", "year": 1957},
]

TEMPLATES = complaint_letters([
    {
        "type": "access",
        "title": "Request for Access to Records",
        "title_hi": "अभिलेखों तक पहुँच हेतु अनुरोध",
        "authority": "Director, [Library / Archive]",
        "authority_hi": "निदेशक, [पुस्तकालय / अभिलेखागार]",
        "subject": "Request for access to [document]",
        "subject_hi": "[दस्तावेज़] तक पहुँच हेतु अनुरोध",
        "law": "the Public Records Act 1993",
    },
])

EXTRAS = {
    "institutions": RESOURCES["libraries"],
}

assistant = SectorAssistant(
    slug="library",
    title="Constitutional Library Assistant",
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
