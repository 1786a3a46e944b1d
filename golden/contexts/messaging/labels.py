"""
Hebrew display labels for targeting vocabularies.

Substituted into content by the tag resolver. Keys are the stored (English)
vocabulary values.
"""

PERSONA_LABELS = {
    "parent": "הורה",
    "student": "סטודנט",
    "office_worker": "עובד משרד",
    "home_worker": "עובד מהבית",
    "remote_worker": "עובד מהבית",
    "senior": "גיל הזהב",
    "athlete": "ספורטאי",
    "reservist": "מילואימניק",
}

LOCATION_LABELS = {
    "home": "בית",
    "park": "פארק",
    "office": "משרד",
    "street": "רחוב",
    "gym": "מכון כושר",
    "school": "בית ספר",
    "airport": "שדה תעופה",
    "library": "ספרייה",
}

TIME_OF_DAY_LABELS = {
    "morning": "בוקר",
    "afternoon": "צהריים",
    "evening": "ערב",
    "night": "לילה",
}

SPORT_LABELS = {
    "running": "ריצה",
    "walking": "הליכה",
    "cycling": "רכיבה",
    "swimming": "שחייה",
    "basketball": "כדורסל",
    "football": "כדורגל",
    "tennis": "טניס",
    "calisthenics": "קליסתניקס",
    "crossfit": "קרוספיט",
    "yoga": "יוגה",
    "functional": "אימון פונקציונלי",
}

GOAL_LABELS = {
    "healthy_lifestyle": "אורח חיים בריא",
    "performance_boost": "שיפור ביצועים",
    "weight_loss": "ירידה במשקל",
    "skill_mastery": "שליטה במיומנויות",
}

MUSCLE_LABELS = {
    "chest": "חזה",
    "back": "גב",
    "shoulders": "כתפיים",
    "abs": "בטן",
    "obliques": "אלכסונים",
    "forearms": "אמה",
    "biceps": "דו ראשי",
    "triceps": "שלוש ראשי",
    "quads": "ארבע ראשי",
    "hamstrings": "מיתר ברך",
    "glutes": "ישבן",
    "calves": "שוקיים",
    "traps": "טרפז",
    "cardio": "קרדיו",
    "full_body": "כל הגוף",
    "core": "ליבה",
    "legs": "רגליים",
}

# Location-name fallbacks when the venue has no name of its own
VENUE_FALLBACKS = {
    "park": "הפארק הקרוב",
    "gym": "מכון הכושר",
}

# Generic fallbacks
DEFAULT_USER_LABEL = "משתמש"
DEFAULT_LOCATION_LABEL = "המיקום"
DEFAULT_GOAL_LABEL = "אימון"
DEFAULT_EXERCISE_LABEL = "התרגיל"
DEFAULT_CATEGORY_LABEL = "כוח"
DEFAULT_MUSCLES_LABEL = "כל הגוף"
DEFAULT_MUSCLE_LABEL = "השרירים"
DEFAULT_EQUIPMENT_LABEL = "ציוד מינימלי"

# Joins the first two items of a list ("chest and back")
LIST_JOINER = " ו-"

METERS_UNIT = "מ׳"
KILOMETERS_UNIT = "ק״מ"
