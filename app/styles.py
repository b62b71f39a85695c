# app/styles.py


# =====================
# Color Palette
# =====================
NEEDS_COLOR = "#4F46E5"     # indigo
WANTS_COLOR = "#F59E0B"     # amber
SAVINGS_COLOR = "#10B981"   # emerald

# [Needs, Wants, Savings]
ALLOCATION_COLORS = [NEEDS_COLOR, WANTS_COLOR, SAVINGS_COLOR]

CURRENT_BAR_COLOR = "#E2E8F0"
PREDICTED_BAR_COLOR = NEEDS_COLOR

GRAY_100 = "#F1F5F9"
GRAY_400 = "#94A3B8"
GRAY_800 = "#1F2937"
