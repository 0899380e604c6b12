"""
Symptom Tracking Constants

Vocabulary, severity scale and report thresholds shared by the services.
"""

from pcos_tracker.utils.enums import SymptomType

# Recognized vocabulary, in the order it is presented to clients
SYMPTOM_TYPES = tuple(e.value for e in SymptomType)
RECOGNIZED_SYMPTOMS = frozenset(SYMPTOM_TYPES)

# Severity scale
MIN_SEVERITY = 1.0
MAX_SEVERITY = 10.0
DEFAULT_SEVERITY = 5.0

SEVERITY_LABELS = {
    1: "very mild",
    2: "very mild",
    3: "mild",
    4: "mild",
    5: "moderate",
    6: "moderate",
    7: "severe",
    8: "severe",
    9: "very severe",
    10: "very severe",
}

# Average severity at or above which a provider consultation is recommended
HIGH_SEVERITY_THRESHOLD = 7.0

# BMI category upper bounds (exclusive)
BMI_UNDERWEIGHT_MAX = 18.5
BMI_NORMAL_MAX = 25.0
BMI_OVERWEIGHT_MAX = 30.0

# Report text
INSIGHT_NO_SYMPTOMS = "No symptoms recorded in the selected time period."
INSIGHT_MOST_COMMON = "Your most common symptom is {symptom}."
RECOMMEND_START_TRACKING = "Start recording your symptoms regularly for better insights."
RECOMMEND_KEEP_TRACKING = "Continue tracking your symptoms to identify patterns over time."
RECOMMEND_CONSULT_PROVIDER = (
    "Consider consulting with a healthcare provider about your high-severity symptoms."
)
