LANGUAGES = [
    "JavaScript", "Python", "Java", "C#", "Ruby",
    "Go", "Swift", "Rust", "TypeScript", "PHP",
    "C++", "Kotlin", "SQL", "HTML/CSS", "React",
    "Angular", "Vue.js", "Node.js", "Django", "Flutter"
]

LEARNING_STYLES = [
    "Visual", "Hands-on", "Reading/Writing", "Project-based", "Video tutorials"
]

TIME_COMMITMENTS = {
    "minimal": "A few hours a week",
    "moderate": "5-10 hours a week",
    "significant": "10-20 hours a week",
    "fulltime": "Full-time dedication",
}

SKILL_LEVELS = {
    1: "Beginner",
    2: "Novice",
    3: "Intermediate",
    4: "Advanced",
    5: "Expert",
}

# Skill levels at or below this get the beginner track
BEGINNER_MAX_SKILL = 2


def get_skill_level_text(level):
    return SKILL_LEVELS.get(level, "Beginner")


def is_beginner(current_skill):
    return current_skill <= BEGINNER_MAX_SKILL


def form_options():
    """Everything a client needs to render the learner profile form."""
    return {
        "languages": LANGUAGES,
        "learning_styles": LEARNING_STYLES,
        "time_commitments": [
            {"value": value, "label": label} for value, label in TIME_COMMITMENTS.items()
        ],
        "skill_levels": [
            {"value": value, "label": label} for value, label in SKILL_LEVELS.items()
        ],
    }
