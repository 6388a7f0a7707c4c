"""Static lexicon tables shared by every analysis stage.

All tables are built once at import time and never mutated afterwards,
so concurrent requests can read them without locking.
"""

import re
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Stop-words: dropped by the tokenizer before any counting happens
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "would", "you", "your", "have", "had",
    "been", "were", "said", "each", "which", "their", "time", "if",
    "up", "out", "many", "then", "them", "these", "so", "some", "her",
    "make", "like", "into", "him", "two", "more",
    "very", "what", "know", "just", "first", "get", "over", "think",
    "also", "back", "after", "use", "work", "life", "only", "new",
    "way", "may", "say", "come", "could", "now", "than", "most",
    "other", "how", "take", "years", "good", "give", "day", "us",
    "well", "old", "see", "own", "man", "here", "thing", "both",
    "those", "part", "being", "system", "such", "made", "school",
    "show", "going", "where", "much", "should", "used", "through",
})

# ---------------------------------------------------------------------------
# Sentiment word lists
# ---------------------------------------------------------------------------
POSITIVE_WORDS: frozenset[str] = frozenset({
    "excellent", "outstanding", "exceptional", "superior", "impressive",
    "successful", "achieved", "accomplished", "improved", "increased",
    "enhanced", "optimized", "streamlined", "innovative", "creative",
    "effective", "efficient", "productive", "reliable", "dedicated",
    "motivated", "experienced", "skilled", "proficient", "expert",
    "advanced", "strong", "solid", "comprehensive", "extensive",
    "proven", "demonstrated", "delivered", "exceeded", "surpassed",
})

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "failed", "unsuccessful", "poor", "weak", "inadequate", "insufficient",
    "limited", "basic", "minimal", "struggled", "difficult", "challenging",
    "problem", "issue", "concern", "lacking", "missing", "unable",
    "cannot", "never", "nothing", "nobody", "nowhere", "neither",
    "nor", "not", "no", "none", "without", "less", "least", "worst",
})

# ---------------------------------------------------------------------------
# Skill catalog: category -> canonical terms, scanned in this order
# ---------------------------------------------------------------------------
SKILL_CATALOG: MappingProxyType = MappingProxyType({
    "languages": (
        "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Go",
        "Rust", "Swift", "Kotlin", "Ruby", "PHP", "Scala", "R", "MATLAB",
        "Perl", "Shell", "Bash", "PowerShell", "HTML", "CSS", "SQL",
    ),
    "frameworks": (
        "React", "Angular", "Vue.js", "Node.js", "Express", "Django",
        "Flask", "Spring", "Laravel", "Rails", "ASP.NET", "jQuery",
        "Bootstrap", "Tailwind", "Next.js", "Nuxt.js",
    ),
    "databases": (
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "Cassandra", "Oracle",
        "SQL Server", "SQLite", "DynamoDB", "Elasticsearch", "Neo4j",
        "MariaDB", "CouchDB",
    ),
    "cloud_devops": (
        "AWS", "Azure", "Google Cloud", "GCP", "Docker", "Kubernetes",
        "Jenkins", "GitLab CI", "GitHub Actions", "Terraform", "Ansible",
        "Chef", "Puppet", "Vagrant",
    ),
    "tools": (
        "Git", "SVN", "JIRA", "Confluence", "Slack", "Trello", "Figma",
        "Adobe", "Photoshop", "Illustrator", "Sketch", "InVision", "Zeplin",
    ),
    "methodologies": (
        "Agile", "Scrum", "Kanban", "DevOps", "CI/CD", "TDD", "BDD",
        "Microservices", "REST", "GraphQL", "SOAP", "API",
    ),
    "data_science": (
        "Machine Learning", "Deep Learning", "AI", "Artificial Intelligence",
        "TensorFlow", "PyTorch", "Pandas", "NumPy", "Scikit-learn",
        "Jupyter", "Apache Spark", "Hadoop", "Tableau", "Power BI",
    ),
    "mobile": (
        "iOS", "Android", "React Native", "Flutter", "Xamarin", "Ionic",
        "Cordova", "PhoneGap",
    ),
    "testing": (
        "Jest", "Mocha", "Cypress", "Selenium", "Puppeteer", "Playwright",
        "JUnit", "TestNG", "Karma", "Jasmine",
    ),
})

# ---------------------------------------------------------------------------
# Entity catalogs
# ---------------------------------------------------------------------------
COMPANY_CATALOG: tuple[str, ...] = (
    "Google", "Microsoft", "Apple", "Amazon", "Facebook", "Meta", "Netflix",
    "Tesla", "Uber", "Airbnb", "Spotify", "Twitter", "LinkedIn", "GitHub",
    "Salesforce", "Oracle", "IBM", "Intel", "NVIDIA", "Adobe", "Slack",
    "Zoom", "Dropbox", "Atlassian", "Shopify", "Square", "PayPal", "eBay",
    "Yahoo", "Cisco", "VMware", "Red Hat", "MongoDB", "Elastic", "Snowflake",
    "Databricks", "Palantir", "Stripe", "Twilio", "Okta", "ServiceNow",
    "Workday", "HubSpot", "Zendesk", "Splunk", "New Relic", "DataDog",
    "PagerDuty", "HashiCorp", "Docker", "Kubernetes", "Jenkins", "GitLab",
    "Bitbucket", "Jira", "Confluence", "Trello", "Asana", "Notion", "Figma",
    "Sketch", "InVision", "Zeplin",
)

# Two independently capped role groups: seniority/title words, then specialties
ROLE_CATALOGS: tuple[tuple[str, ...], ...] = (
    (
        "Software Engineer", "Developer", "Programmer", "Architect",
        "Manager", "Director", "Lead", "Senior", "Junior", "Intern",
        "Principal", "Staff", "Distinguished", "Fellow",
    ),
    (
        "Full Stack", "Frontend", "Backend", "DevOps", "Data Scientist",
        "Data Engineer", "Data Analyst", "Product Manager", "Project Manager",
        "Scrum Master", "UI/UX Designer", "UX Designer", "UI Designer",
        "QA Engineer", "Test Engineer", "Security Engineer",
        "Site Reliability Engineer", "Platform Engineer", "Cloud Engineer",
        "Machine Learning Engineer", "AI Engineer", "Research Scientist",
        "Technical Writer", "Business Analyst", "Systems Analyst",
        "Database Administrator", "Network Administrator", "IT Support",
        "Help Desk", "Technical Support",
    ),
)

CERTIFICATION_CATALOG: tuple[str, ...] = (
    "AWS Certified", "Microsoft Certified", "Google Cloud", "Oracle Certified",
    "Cisco", "CompTIA", "PMP", "Scrum Master", "CSM", "PSM", "CISSP", "CISM",
    "CISA", "CEH", "OSCP", "CKA", "CKS", "CKAD", "Kubernetes", "Docker",
    "Terraform", "Ansible", "Jenkins", "GitLab", "GitHub", "Jira",
    "Confluence", "Salesforce", "ServiceNow", "Workday", "HubSpot", "Zendesk",
    "Splunk", "New Relic", "DataDog", "PagerDuty", "HashiCorp",
)

# "Certified Kubernetes Administrator", "Certification in Cloud Security", ...
CERTIFICATION_PHRASE_RE = re.compile(
    r"\b(?:Certificate|Certification|Certified)\s+[A-Z][a-zA-Z\s]+",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Capitalized-token heuristic for skills the catalog does not know
# ---------------------------------------------------------------------------
CAPITALIZED_TERM_RE = re.compile(r"\b[A-Z][a-zA-Z]*(?:\.[a-zA-Z]+)*\b")

TECHNICAL_INDICATORS: tuple[str, ...] = (
    "js", "py", "sql", "api", "ui", "ux", "ai", "ml", "ci", "cd",
    "aws", "gcp", "css", "html", "xml", "json", "rest", "soap",
    "app", "web", "dev", "tech", "sys", "net", "db", "server",
)

# ---------------------------------------------------------------------------
# Synonym groups: every member denotes the same capability
# ---------------------------------------------------------------------------
SYNONYM_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"javascript", "js", "node.js", "nodejs"}),
    frozenset({"python", "py"}),
    frozenset({"react", "reactjs", "react.js"}),
    frozenset({"angular", "angularjs"}),
    frozenset({"vue", "vuejs", "vue.js"}),
    frozenset({"machine learning", "ml", "ai", "artificial intelligence"}),
    frozenset({"database", "db", "sql", "nosql"}),
    frozenset({"aws", "amazon web services"}),
    frozenset({"gcp", "google cloud platform", "google cloud"}),
)

# ---------------------------------------------------------------------------
# Importance cues for missing skills, in strict precedence order.
# Each entry: (cue phrase, importance, reason template)
# ---------------------------------------------------------------------------
IMPORTANCE_CUES: tuple[tuple[str, str, str], ...] = (
    ("required", "high", "{skill} is listed as a required skill"),
    ("must have", "high", '{skill} is marked as "must have"'),
    ("essential", "high", "{skill} is described as essential"),
    ("preferred", "medium", "{skill} is listed as preferred"),
    ("experience with", "medium", "Experience with {skill} is mentioned"),
    ("nice to have", "low", "{skill} is nice to have"),
    ("bonus", "low", "{skill} would be a bonus"),
)

DEFAULT_IMPORTANCE = ("medium", "{skill} appears in the job requirements")

CLOUD_TERMS: tuple[str, ...] = ("cloud", "aws", "azure", "gcp")
AGILE_TERMS: tuple[str, ...] = ("agile", "scrum")
CERTIFICATION_TERMS: tuple[str, ...] = ("certification", "certified")


def _term_pattern(term: str) -> re.Pattern:
    """Compile a catalog term into a case-insensitive whole-term pattern.

    Dots inside a term are optional ("Node.js" also matches "NodeJS") and
    the term must not be glued to a neighbouring letter or digit, so "Java"
    does not fire inside "JavaScript".
    """
    escaped = re.escape(term).replace(r"\.", r"\.?")
    return re.compile(rf"(?<![a-zA-Z0-9]){escaped}(?![a-zA-Z0-9])", re.IGNORECASE)


def _compile_terms(terms: tuple[str, ...]) -> tuple[tuple[str, re.Pattern], ...]:
    return tuple((term, _term_pattern(term)) for term in terms)


COMPILED_SKILL_CATALOG: MappingProxyType = MappingProxyType({
    category: _compile_terms(terms) for category, terms in SKILL_CATALOG.items()
})
COMPILED_COMPANY_CATALOG = _compile_terms(COMPANY_CATALOG)
COMPILED_ROLE_CATALOGS = tuple(_compile_terms(group) for group in ROLE_CATALOGS)
COMPILED_CERTIFICATION_CATALOG = _compile_terms(CERTIFICATION_CATALOG)
