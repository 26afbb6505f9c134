"""Static reference data: skill vocabularies, job roles and learning paths.

Everything here is built once at import time and exposed read-only.
Each skill label lives in exactly one category, so extraction yields a
single match per label.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple

from models.schemas.job_roles import (
    DemandLevel,
    ExperienceBand,
    ExperienceLevel,
    JobRoleProfile,
)


class LearningPath(NamedTuple):
    time: str
    resources: tuple[str, ...]


# ---------------------------------------------------------------------------
# Skill vocabularies (labels are matched as whole words, case-insensitive)
# ---------------------------------------------------------------------------
HARD_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Programming Languages": (
        "JavaScript", "TypeScript", "Python", "Java", "C#", "C++", "C", "Go", "Rust", "Swift", "Kotlin",
        "PHP", "Ruby", "Scala", "R", "MATLAB", "Perl", "Objective-C", "Dart", "Elixir", "Clojure",
    ),
    "Frontend Technologies": (
        "React", "Vue.js", "Angular", "Next.js", "Nuxt.js", "Svelte", "jQuery", "Bootstrap", "Tailwind CSS",
        "Material-UI", "Chakra UI", "HTML", "CSS", "SASS", "LESS", "Webpack", "Vite", "Parcel",
    ),
    "Backend Technologies": (
        "Node.js", "Express.js", "Nest.js", "Django", "Flask", "FastAPI", "Spring", "ASP.NET", "Laravel",
        "Ruby on Rails", "Gin", "Echo", "Fiber", "Koa.js", "Hapi.js",
    ),
    "Databases": (
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite", "Oracle", "SQL Server", "MariaDB",
        "DynamoDB", "Cassandra", "Neo4j", "InfluxDB", "CouchDB", "Firebase", "Supabase",
    ),
    "Cloud Platforms": (
        "AWS", "Azure", "Google Cloud", "GCP", "Heroku", "Netlify", "Vercel", "DigitalOcean",
        "Linode", "Vultr", "IBM Cloud", "Oracle Cloud",
    ),
    "DevOps & Tools": (
        "Docker", "Kubernetes", "Jenkins", "GitLab CI", "GitHub Actions", "CircleCI", "Travis CI",
        "Terraform", "Ansible", "Puppet", "Chef", "Vagrant", "Nginx", "Apache", "Linux", "Ubuntu",
    ),
    "Databases & Query Languages": (
        "SQL", "NoSQL", "GraphQL", "REST API", "SOAP", "gRPC", "JSON", "XML", "YAML",
    ),
    "Testing": (
        "Jest", "Mocha", "Chai", "Cypress", "Selenium", "Playwright", "Puppeteer", "JUnit",
        "PyTest", "RSpec", "PHPUnit", "Vitest", "Testing Library",
    ),
    "Version Control": (
        "Git", "GitHub", "GitLab", "Bitbucket", "SVN", "Mercurial",
    ),
    "Mobile Development": (
        "React Native", "Flutter", "Ionic", "Xamarin", "Java Android",
    ),
    "Data Science & Analytics": (
        "Pandas", "NumPy", "Scikit-learn", "TensorFlow", "PyTorch", "Keras", "Jupyter",
        "Tableau", "Power BI", "Excel", "SPSS", "SAS", "Apache Spark", "Hadoop",
    ),
    "Design & UI/UX": (
        "Figma", "Sketch", "Adobe XD", "Photoshop", "Illustrator", "InVision", "Zeplin",
        "Framer", "Principle", "Wireframing", "Prototyping",
    ),
})

SOFT_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Communication": (
        "Communication", "Public Speaking", "Presentation", "Writing", "Documentation",
        "Technical Writing", "Verbal Communication", "Written Communication", "Storytelling",
    ),
    "Leadership": (
        "Leadership", "Team Leadership", "Project Management", "People Management",
        "Mentoring", "Coaching", "Strategic Planning", "Vision", "Delegation",
    ),
    "Collaboration": (
        "Teamwork", "Collaboration", "Cross-functional", "Stakeholder Management",
        "Partnership", "Networking", "Relationship Building", "Interpersonal Skills",
    ),
    "Problem Solving": (
        "Problem Solving", "Critical Thinking", "Analytical", "Troubleshooting",
        "Debugging", "Root Cause Analysis", "Decision Making", "Strategic Thinking",
    ),
    "Adaptability": (
        "Adaptability", "Flexibility", "Learning Agility", "Change Management",
        "Innovation", "Creativity", "Open-minded", "Resilience",
    ),
    "Project Management": (
        "Agile", "Scrum", "Kanban", "Waterfall", "Planning",
        "Organization", "Time Management", "Prioritization", "Resource Management",
    ),
    "Quality & Process": (
        "Quality Assurance", "Attention to Detail", "Process Improvement",
        "Best Practices", "Standards", "Compliance", "Optimization",
    ),
    "Customer Focus": (
        "Customer Service", "Client Relations", "User Experience", "Customer Success",
        "Business Requirements", "Stakeholder Engagement",
    ),
})


# ---------------------------------------------------------------------------
# Learning metadata for target-job checklists
# ---------------------------------------------------------------------------
SKILL_LEARNING_PATHS: Mapping[str, LearningPath] = MappingProxyType({
    "JavaScript": LearningPath("2-3 months", ("MDN Web Docs", "freeCodeCamp", "JavaScript.info")),
    "TypeScript": LearningPath("3-4 weeks", ("TypeScript Handbook", "Execute Program", "Type Challenges")),
    "React": LearningPath("2-3 months", ("React Documentation", "React Tutorial", "Epic React")),
    "Node.js": LearningPath("1-2 months", ("Node.js Documentation", "Node.js Course", "Express.js Guide")),
    "Python": LearningPath("2-3 months", ("Python.org Tutorial", "Automate the Boring Stuff", "Python Crash Course")),
    "AWS": LearningPath("3-6 months", ("AWS Training", "Cloud Practitioner Course", "AWS Documentation")),
    "Docker": LearningPath("3-4 weeks", ("Docker Documentation", "Docker Mastery Course", "Docker Tutorial")),
    "SQL": LearningPath("4-6 weeks", ("W3Schools SQL", "SQL Bolt", "PostgreSQL Tutorial")),
    "GraphQL": LearningPath("2-3 weeks", ("GraphQL.org", "Apollo GraphQL Course", "The Road to GraphQL")),
    "MongoDB": LearningPath("2-3 weeks", ("MongoDB University", "MongoDB Documentation", "Mongoose Guide")),
    "Next.js": LearningPath("2-4 weeks", ("Next.js Documentation", "Vercel Learn", "Next.js Handbook")),
    "Vue.js": LearningPath("1-2 months", ("Vue.js Documentation", "Vue Mastery", "Vue School")),
    "Angular": LearningPath("2-3 months", ("Angular Documentation", "Angular University", "Angular Tutorial")),
    "Kubernetes": LearningPath("2-4 months", ("Kubernetes Documentation", "CNCF Training", "Kubernetes Course")),
    "Jest": LearningPath("1-2 weeks", ("Jest Documentation", "Testing JavaScript", "Jest Tutorial")),
    "Cypress": LearningPath("1-2 weeks", ("Cypress Documentation", "Cypress Real World App", "Testing Course")),
})

DEFAULT_REQUIRED_LEARNING_TIME = "2-4 weeks"
DEFAULT_PREFERRED_LEARNING_TIME = "1-3 weeks"
DEFAULT_LEARNING_RESOURCES: tuple[str, ...] = (
    "Official Documentation", "Online Tutorials", "Practice Projects",
)


# ---------------------------------------------------------------------------
# Job roles
# ---------------------------------------------------------------------------
def _bands(
    junior: tuple[int, str],
    mid: tuple[int, str],
    senior: tuple[int, str],
    lead: tuple[int, str],
) -> Mapping[ExperienceLevel, ExperienceBand]:
    """Build experience bands in ascending level order."""
    return MappingProxyType({
        level: ExperienceBand(min_skills=min_skills, salary_range=salary)
        for level, (min_skills, salary) in zip(ExperienceLevel, (junior, mid, senior, lead))
    })


_FRONTEND_BANDS = _bands(
    (3, "$60,000 - $80,000"), (5, "$80,000 - $110,000"),
    (7, "$110,000 - $140,000"), (9, "$140,000 - $180,000"),
)
_FULL_STACK_BANDS = _bands(
    (4, "$70,000 - $90,000"), (6, "$90,000 - $120,000"),
    (8, "$120,000 - $150,000"), (10, "$150,000 - $190,000"),
)
_BACKEND_BANDS = _bands(
    (3, "$65,000 - $85,000"), (5, "$85,000 - $115,000"),
    (7, "$115,000 - $145,000"), (9, "$145,000 - $185,000"),
)
_DEVOPS_BANDS = _bands(
    (3, "$70,000 - $90,000"), (5, "$90,000 - $125,000"),
    (7, "$125,000 - $160,000"), (9, "$160,000 - $200,000"),
)
_DATA_SCIENCE_BANDS = _bands(
    (3, "$75,000 - $95,000"), (5, "$95,000 - $130,000"),
    (7, "$130,000 - $170,000"), (9, "$170,000 - $220,000"),
)
_MOBILE_BANDS = _bands(
    (2, "$65,000 - $85,000"), (4, "$85,000 - $115,000"),
    (6, "$115,000 - $145,000"), (8, "$145,000 - $185,000"),
)
_CLOUD_BANDS = _bands(
    (2, "$70,000 - $90,000"), (4, "$90,000 - $125,000"),
    (6, "$125,000 - $160,000"), (8, "$160,000 - $200,000"),
)
_QA_BANDS = _bands(
    (2, "$55,000 - $75,000"), (4, "$75,000 - $100,000"),
    (6, "$100,000 - $130,000"), (8, "$130,000 - $160,000"),
)
_PRODUCT_BANDS = _bands(
    (2, "$80,000 - $100,000"), (4, "$100,000 - $135,000"),
    (6, "$135,000 - $170,000"), (8, "$170,000 - $220,000"),
)


def _index(*roles: JobRoleProfile) -> Mapping[str, JobRoleProfile]:
    return MappingProxyType({role.title: role for role in roles})


# Comparison catalog: the roles a user can pick as a target job.
TARGET_JOB_ROLES: Mapping[str, JobRoleProfile] = _index(
    JobRoleProfile(
        title="Frontend Developer",
        required_skills=("JavaScript", "HTML", "CSS", "React"),
        preferred_skills=("TypeScript", "Vue.js", "Angular", "Tailwind CSS", "SASS", "Webpack", "Jest"),
        category="Frontend Development",
        description="Build user interfaces and experiences for web applications using modern frontend technologies",
        popularity=95,
        experience_levels=_FRONTEND_BANDS,
    ),
    JobRoleProfile(
        title="Full Stack Developer",
        required_skills=("JavaScript", "React", "Node.js", "HTML", "CSS", "SQL"),
        preferred_skills=("TypeScript", "Express.js", "MongoDB", "PostgreSQL", "AWS", "Docker", "GraphQL"),
        category="Full Stack Development",
        description="Develop both frontend and backend components of web applications with end-to-end responsibility",
        popularity=90,
        experience_levels=_FULL_STACK_BANDS,
    ),
    JobRoleProfile(
        title="Backend Developer",
        required_skills=("Node.js", "JavaScript", "SQL", "REST API"),
        preferred_skills=("TypeScript", "Python", "Express.js", "MongoDB", "PostgreSQL", "Docker", "AWS", "GraphQL"),
        category="Backend Development",
        description="Design and implement server-side logic, APIs, and database architecture",
        popularity=85,
        experience_levels=_BACKEND_BANDS,
    ),
    JobRoleProfile(
        title="React Developer",
        required_skills=("React", "JavaScript", "HTML", "CSS"),
        preferred_skills=("TypeScript", "Next.js", "Redux", "Jest", "Webpack", "GraphQL", "Material-UI"),
        category="Frontend Development",
        description="Specialize in building React-based applications and component libraries",
        popularity=88,
        experience_levels=_BACKEND_BANDS,
    ),
    JobRoleProfile(
        title="DevOps Engineer",
        required_skills=("Docker", "AWS", "Linux", "Git"),
        preferred_skills=("Kubernetes", "Jenkins", "Terraform", "Ansible", "Python", "CI/CD", "Nginx"),
        category="DevOps & Infrastructure",
        description="Manage infrastructure, deployment pipelines, and system reliability",
        popularity=80,
        experience_levels=_DEVOPS_BANDS,
    ),
    JobRoleProfile(
        title="Data Scientist",
        required_skills=("Python", "SQL", "Pandas", "NumPy"),
        preferred_skills=("TensorFlow", "PyTorch", "Scikit-learn", "Jupyter", "R", "Tableau", "Apache Spark"),
        category="Data Science & Analytics",
        description="Analyze data to derive insights and build predictive models",
        popularity=75,
        experience_levels=_DATA_SCIENCE_BANDS,
    ),
    JobRoleProfile(
        title="Mobile Developer",
        required_skills=("React Native", "JavaScript", "Mobile Development"),
        preferred_skills=("Swift", "Kotlin", "Flutter", "TypeScript", "iOS", "Android", "Firebase"),
        category="Mobile Development",
        description="Build mobile applications for iOS and Android platforms",
        popularity=70,
        experience_levels=_MOBILE_BANDS,
    ),
    JobRoleProfile(
        title="Cloud Engineer",
        required_skills=("AWS", "Cloud Platforms", "Linux"),
        preferred_skills=("Azure", "Google Cloud", "Docker", "Kubernetes", "Terraform", "Python"),
        category="Cloud & Infrastructure",
        description="Design and manage cloud infrastructure and services",
        popularity=82,
        experience_levels=_CLOUD_BANDS,
    ),
    JobRoleProfile(
        title="QA Engineer",
        required_skills=("Testing", "JavaScript", "Quality Assurance"),
        preferred_skills=("Jest", "Cypress", "Selenium", "Playwright", "Automation", "Python"),
        category="Quality Assurance",
        description="Ensure software quality through testing and automation",
        popularity=65,
        experience_levels=_QA_BANDS,
    ),
    JobRoleProfile(
        title="Product Manager",
        required_skills=("Project Management", "Communication", "Strategic Planning"),
        preferred_skills=("Agile", "Scrum", "Leadership", "User Experience", "Analytics", "Roadmapping"),
        category="Product Management",
        description="Guide product development and strategy from conception to launch",
        popularity=72,
        experience_levels=_PRODUCT_BANDS,
    ),
)

# Suggestion catalog: market-oriented view used when ranking roles.
MARKET_JOB_ROLES: Mapping[str, JobRoleProfile] = _index(
    JobRoleProfile(
        title="Frontend Developer",
        required_skills=("JavaScript", "HTML", "CSS", "React"),
        preferred_skills=("TypeScript", "Vue.js", "Angular", "Tailwind CSS", "SASS"),
        description="Build user interfaces and experiences for web applications",
        experience_levels=_FRONTEND_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+12% annually",
        market_trends=("React 18+", "TypeScript adoption", "Micro-frontends", "Web3 integration"),
    ),
    JobRoleProfile(
        title="Full Stack Developer",
        required_skills=("JavaScript", "React", "Node.js", "HTML", "CSS"),
        preferred_skills=("TypeScript", "Express.js", "MongoDB", "PostgreSQL", "AWS"),
        description="Develop both frontend and backend components of web applications",
        experience_levels=_FULL_STACK_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+15% annually",
        market_trends=("Full-stack frameworks", "Serverless architecture", "JAMstack", "API-first design"),
    ),
    JobRoleProfile(
        title="Backend Developer",
        required_skills=("Node.js", "JavaScript", "SQL", "REST API"),
        preferred_skills=("TypeScript", "Python", "Express.js", "MongoDB", "PostgreSQL", "Docker"),
        description="Design and implement server-side logic and database architecture",
        experience_levels=_BACKEND_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+10% annually",
        market_trends=("Microservices", "Event-driven architecture", "GraphQL APIs", "Database optimization"),
    ),
    JobRoleProfile(
        title="React Developer",
        required_skills=("React", "JavaScript", "HTML", "CSS"),
        preferred_skills=("TypeScript", "Next.js", "Redux", "Jest", "Webpack"),
        description="Specialize in building React-based applications and components",
        experience_levels=_BACKEND_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+18% annually",
        market_trends=(
            "React Server Components", "Next.js 14+", "State management evolution", "Performance optimization",
        ),
    ),
    JobRoleProfile(
        title="DevOps Engineer",
        required_skills=("Docker", "AWS", "Linux", "Git"),
        preferred_skills=("Kubernetes", "Jenkins", "Terraform", "Ansible", "Python"),
        description="Manage infrastructure, deployment pipelines, and system reliability",
        experience_levels=_DEVOPS_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+20% annually",
        market_trends=("Platform engineering", "GitOps", "Observability", "FinOps practices"),
    ),
    JobRoleProfile(
        title="Data Scientist",
        required_skills=("Python", "SQL", "Pandas", "NumPy"),
        preferred_skills=("TensorFlow", "PyTorch", "Scikit-learn", "Jupyter", "R"),
        description="Analyze data to derive insights and build predictive models",
        experience_levels=_DATA_SCIENCE_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+22% annually",
        market_trends=("LLM integration", "MLOps", "Real-time analytics", "Ethical AI"),
    ),
    JobRoleProfile(
        title="Mobile Developer",
        required_skills=("React Native", "JavaScript", "Mobile Development"),
        preferred_skills=("Swift", "Kotlin", "Flutter", "TypeScript", "iOS", "Android"),
        description="Build mobile applications for iOS and Android platforms",
        experience_levels=_MOBILE_BANDS,
        demand_level=DemandLevel.MEDIUM,
        remote_available=True,
        industry_growth="+8% annually",
        market_trends=(
            "Cross-platform development", "React Native 0.73+", "Flutter adoption", "Mobile-first design",
        ),
    ),
    JobRoleProfile(
        title="Cloud Engineer",
        required_skills=("AWS", "Cloud Platforms", "Linux"),
        preferred_skills=("Azure", "Google Cloud", "Docker", "Kubernetes", "Terraform"),
        description="Design and manage cloud infrastructure and services",
        experience_levels=_CLOUD_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+25% annually",
        market_trends=("Multi-cloud strategies", "Serverless computing", "Edge computing", "Cloud security"),
    ),
    JobRoleProfile(
        title="QA Engineer",
        required_skills=("Testing", "JavaScript", "Quality Assurance"),
        preferred_skills=("Jest", "Cypress", "Selenium", "Playwright", "Automation"),
        description="Ensure software quality through testing and automation",
        experience_levels=_QA_BANDS,
        demand_level=DemandLevel.MEDIUM,
        remote_available=True,
        industry_growth="+7% annually",
        market_trends=("Shift-left testing", "AI-powered testing", "Test automation", "API testing"),
    ),
    JobRoleProfile(
        title="Product Manager",
        required_skills=("Project Management", "Communication", "Strategic Planning"),
        preferred_skills=("Agile", "Scrum", "Leadership", "User Experience", "Analytics"),
        description="Guide product development and strategy from conception to launch",
        experience_levels=_PRODUCT_BANDS,
        demand_level=DemandLevel.HIGH,
        remote_available=True,
        industry_growth="+14% annually",
        market_trends=("AI-driven insights", "Data-driven decisions", "User-centric design", "Agile methodologies"),
    ),
)


# ---------------------------------------------------------------------------
# Market data for role suggestions
# ---------------------------------------------------------------------------
MARKET_TRENDS: tuple[str, ...] = (
    "AI/ML Integration", "Cloud-Native Development", "DevOps Automation",
    "Remote-First Culture", "Microservices Architecture", "Data Privacy",
    "Sustainability Tech", "Edge Computing", "Cybersecurity Focus",
)

HIGH_DEMAND_SKILLS: tuple[str, ...] = (
    "React", "TypeScript", "Python", "AWS", "Kubernetes", "Docker",
    "GraphQL", "Next.js", "Node.js", "PostgreSQL", "Redis", "Terraform",
    "CI/CD", "Machine Learning", "Data Analysis", "Cybersecurity",
)

# Cosmetic listing attributes; drawn at random, never scored.
COMPANIES: tuple[str, ...] = (
    "Google", "Meta", "Apple", "Microsoft", "Amazon", "Netflix", "Spotify", "Stripe",
    "Shopify", "Airbnb", "Uber", "Lyft", "Twitter", "LinkedIn", "Dropbox", "Slack",
    "Zoom", "Adobe", "Salesforce", "Oracle", "IBM", "Intel", "NVIDIA", "Tesla",
    "TechFlow Inc.", "InnovateCorp", "DataDriven LLC", "CloudFirst Systems", "DevOps Pro",
    "StartupHub", "ScaleUp Technologies", "NextGen Solutions", "DigitalEdge Co.",
)

LOCATIONS: tuple[str, ...] = (
    "San Francisco, CA", "New York, NY", "Seattle, WA", "Austin, TX", "Boston, MA",
    "Los Angeles, CA", "Chicago, IL", "Denver, CO", "Atlanta, GA", "Remote",
    "Toronto, Canada", "London, UK", "Berlin, Germany", "Amsterdam, Netherlands",
)


# ---------------------------------------------------------------------------
# ATS vocabularies (lower-case, matched against lower-cased text)
# ---------------------------------------------------------------------------
ATS_TECHNICAL_SKILLS: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "react", "angular", "vue", "node.js",
    "express", "spring", "django", "flask", "sql", "mongodb", "postgresql", "aws",
    "azure", "docker", "kubernetes", "git", "html", "css", "sass", "tailwind",
    "webpack", "vite", "jest", "cypress", "selenium", "agile", "scrum", "ci/cd",
    "devops", "machine learning", "ai", "data science", "analytics", "tableau",
    "power bi", "excel", "figma", "sketch", "photoshop", "redux", "graphql",
    "rest api", "microservices", "terraform", "jenkins", "github", "linux",
)

ATS_SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving", "analytical",
    "creative", "adaptable", "organized", "detail-oriented", "collaborative",
    "innovative", "strategic", "mentoring", "project management", "time management",
    "critical thinking", "presentation", "negotiation", "customer service",
    "conflict resolution", "decision making", "cross-functional", "stakeholder management",
)

ATS_JOB_TITLES: tuple[str, ...] = (
    "software engineer", "frontend developer", "backend developer", "full stack developer",
    "data scientist", "product manager", "ui/ux designer", "devops engineer",
    "senior developer", "lead developer", "engineering manager", "tech lead",
    "software architect", "qa engineer", "data analyst", "machine learning engineer",
    "cloud engineer", "mobile developer", "react developer", "python developer",
)

# Job title -> titles counted as a partial match
ATS_TITLE_RELATIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "software engineer": ("developer", "programmer", "software developer"),
    "frontend developer": ("ui developer", "web developer", "react developer"),
    "backend developer": ("server developer", "api developer", "python developer"),
    "full stack developer": ("software engineer", "web developer"),
    "data scientist": ("data analyst", "machine learning engineer"),
    "devops engineer": ("cloud engineer", "infrastructure engineer"),
})
