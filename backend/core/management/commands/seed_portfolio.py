from django.core.management.base import BaseCommand

from core.serializers import validate_insert
from core.storage import get_storage

PROJECTS = [
    {
        "title": "Calculator Application",
        "description": "A comprehensive calculator with scientific functions.",
        "techStack": ["React", "CSS"],
        "imageUrl": "https://images.unsplash.com/photo-1587145820266-a5951ee1f620?q=80&w=800&auto=format&fit=crop",
        "category": "Utility",
        "githubUrl": "https://github.com",
        "problemStatement": "Users needed a convenient way to perform scientific calculations.",
        "motivation": "Built to demonstrate complex state management in React.",
        "systemDesign": "Component-based React architecture with utility math functions.",
        "challenges": "Implementing correct parenthesis evaluation.",
        "learnings": "Improved React state and event handling.",
    },
    {
        "title": "Student Record & Marksheet System",
        "description": "C++ based student record management system.",
        "techStack": ["C++", "File Handling"],
        "imageUrl": "https://images.unsplash.com/photo-1501504905252-473c47e087f8?q=80&w=800&auto=format&fit=crop",
        "category": "Academic",
        "githubUrl": "https://github.com",
        "problemStatement": "Manual marksheet management was inefficient.",
        "motivation": "Academic project to practice file persistence.",
        "systemDesign": "Binary file storage with structured records.",
        "challenges": "Maintaining data consistency.",
        "learnings": "Strong understanding of file I/O in C++.",
    },
    {
        "title": "8085 Assembly Programs",
        "description": "Optimized assembly programs for 8085.",
        "techStack": ["8085", "Assembly"],
        "imageUrl": "https://images.unsplash.com/photo-1518770660439-4636190af475?q=80&w=800&auto=format&fit=crop",
        "category": "System",
        "githubUrl": "https://github.com",
        "problemStatement": "Low-level programming requires hands-on practice.",
        "motivation": "Understand CPU instruction cycles.",
        "systemDesign": "Reusable arithmetic subroutines.",
        "challenges": "Limited registers and instructions.",
        "learnings": "Deep understanding of CPU architecture.",
    },
    {
        "title": "Python Utilities & Scripts",
        "description": "Automation scripts for productivity.",
        "techStack": ["Python"],
        "imageUrl": "https://images.unsplash.com/photo-1526379095098-d400fd0bf935?q=80&w=800&auto=format&fit=crop",
        "category": "Utility",
        "githubUrl": "https://github.com",
        "problemStatement": "Manual repetitive tasks wasted time.",
        "motivation": "Improve productivity via automation.",
        "systemDesign": "Modular CLI-based scripts.",
        "challenges": "Handling edge cases in file formats.",
        "learnings": "Advanced Python standard library usage.",
    },
    {
        "title": "Django Backend Systems",
        "description": "Scalable backend architecture using Django.",
        "techStack": ["Python", "Django", "PostgreSQL"],
        "imageUrl": "https://images.unsplash.com/photo-1555099962-4199c345e5dd?q=80&w=800&auto=format&fit=crop",
        "category": "Backend",
        "githubUrl": "https://github.com",
        "problemStatement": "Need for scalable backend systems.",
        "motivation": "Learn real-world backend design.",
        "systemDesign": "REST APIs with relational database.",
        "challenges": "Query optimization.",
        "learnings": "ORM optimization and API security.",
    },
]

SKILLS = [
    {"name": "C", "category": "Languages", "icon": "Code"},
    {"name": "C++", "category": "Languages", "icon": "Code2"},
    {"name": "Python", "category": "Languages", "icon": "Snake"},
    {"name": "Java", "category": "Languages", "icon": "Coffee"},
    {"name": "HTML/CSS", "category": "Web", "icon": "Layout"},
    {"name": "JavaScript", "category": "Web", "icon": "FileJson"},
    {"name": "8085 Microprocessor", "category": "System", "icon": "Cpu"},
    {"name": "Data Structures", "category": "Core", "icon": "Database"},
]

EXPERIENCES = [
    {
        "role": "Student",
        "organization": "Tribhuvan University",
        "period": "2024 – 2028",
        "description": "B.E. in Electronics & Communication Engineering",
        "type": "Education",
    },
]


class Command(BaseCommand):
    help = "Insert sample projects, skills and experience when the database is empty."

    def add_arguments(self, parser):
        parser.add_argument("--force", action="store_true", help="Seed even if projects already exist.")

    def handle(self, *args, **options):
        storage = get_storage()
        existing = len(storage.projects.list())
        if existing and not options["force"]:
            self.stdout.write(f"Found {existing} projects, skipping seed (use --force to seed anyway)")
            return

        counts = {}
        for kind, rows in (("project", PROJECTS), ("skill", SKILLS), ("experience", EXPERIENCES)):
            repo = storage.for_kind(kind)
            for row in rows:
                repo.create(validate_insert(kind, row))
            counts[kind] = len(rows)

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {counts['project']} projects, {counts['skill']} skills, "
            f"{counts['experience']} experiences"
        ))
