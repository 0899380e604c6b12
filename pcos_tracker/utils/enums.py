from enum import Enum

class SymptomType(str, Enum):
    IRREGULAR_PERIODS = "irregular_periods"
    HEAVY_BLEEDING = "heavy_bleeding"
    WEIGHT_GAIN = "weight_gain"
    ACNE = "acne"
    HAIR_LOSS = "hair_loss"
    EXCESS_HAIR_GROWTH = "excess_hair_growth"
    MOOD_CHANGES = "mood_changes"
    FATIGUE = "fatigue"
    PELVIC_PAIN = "pelvic_pain"
    HEADACHES = "headaches"
    SLEEP_PROBLEMS = "sleep_problems"
    INSULIN_RESISTANCE = "insulin_resistance"
    BLOATING = "bloating"

class StoreBackend(str, Enum):
    MEMORY = "memory"
    SQL = "sql"
