MOCK_FAMILIES = [
    {
        "name": "سارا",
        "survey": {"Q1": 8, "Q2": 7, "Q3": 9, "Q4": 8, "Q5": 7, "Q6": 9},
        "search": {
            "child_age": 5,
            "child_gender": "female",
            "interests": ["art_crafts", "pretend_play"],
            "growth_goals": ["social_skills", "creativity"],
            "parenting_style": "authoritative",
            "budget_min": 100000,
            "budget_max": 200000,
        },
    },
    {
        "name": "آرش",
        "survey": {"Q1": 3, "Q2": 4, "Q3": 2, "Q4": 5, "Q5": 3, "Q6": 4},
        "search": {
            "child_age": 8,
            "child_gender": "male",
            "interests": ["science", "puzzles", "building"],
            "growth_goals": ["cognitive_development", "problem_solving", "independence"],
            "parenting_style": "helicopter",
            "budget_min": 200000,
            "budget_max": 400000,
        },
    },
]
