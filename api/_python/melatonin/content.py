"""
Static page content.

Scientific basis for the timeline and guidelines:
- Arendt J (2020). Melatonin: characteristics, concerns, and prospects.
  J Biol Rhythms.
- Auld F et al. (2017). Evidence for the efficacy of melatonin in insomnia.
  Sleep Med Rev, 34, 10-22.
- Sack RL et al. (2007). Circadian rhythm sleep disorders. J Clin Sleep Med.

The circadian timeline is checked at import: every hour of the day must
belong to exactly one segment.
"""

from .timeline import validate_partition
from .types import FaqItem, Guideline, QuickFact, Reference, TimeSegment

PAGE_TITLE = "Melatonin Explorer"
PAGE_DESCRIPTION = (
    "Understand how melatonin works, its roles, benefits, and best practices."
)

# =============================================================================
# Circadian Timeline
# =============================================================================

CIRCADIAN_TIMELINE: tuple[TimeSegment, ...] = (
    TimeSegment(
        label="Daylight alertness",
        start_hour=7,
        end_hour=18,
        description=(
            "Light suppresses melatonin; bright morning exposure keeps the "
            "circadian clock aligned and supports alertness."
        ),
    ),
    TimeSegment(
        label="Dim-light transition",
        start_hour=18,
        end_hour=21,
        description=(
            "Melatonin production ramps up as light levels fall; avoid "
            "blue-light-heavy screens to let the signal rise."
        ),
    ),
    TimeSegment(
        label="Melatonin surge",
        start_hour=21,
        end_hour=2,
        description=(
            "Peak secretion supports sleep onset and deep sleep consolidation; "
            "the window shifts if your schedule changes."
        ),
    ),
    TimeSegment(
        label="Early morning taper",
        start_hour=2,
        end_hour=7,
        description=(
            "Levels decline as the brain prepares the cortisol awakening "
            "response around sunrise."
        ),
    ),
)

validate_partition(CIRCADIAN_TIMELINE)

# =============================================================================
# Cards
# =============================================================================

QUICK_FACTS: tuple[QuickFact, ...] = (
    QuickFact(
        label="Biological origin",
        value="Pineal gland hormone derived from serotonin",
        detail=(
            "Synthesized after dark when the suprachiasmatic nucleus relays "
            "“night” signals."
        ),
    ),
    QuickFact(
        label="Half-life",
        value="30–60 minutes",
        detail=(
            "Explains why fast-release supplements impact sleep onset more "
            "than sleep duration."
        ),
    ),
    QuickFact(
        label="Peak levels",
        value="Between 2–4 a.m.",
        detail="Assuming a typical 10 p.m. bedtime and consistent light-dark cues.",
    ),
)

GUIDELINES: tuple[Guideline, ...] = (
    Guideline(
        title="Sleep onset support",
        dose="0.3–1 mg 60 minutes before bed",
        insight="Low doses mimic physiological levels and help reduce sleep latency.",
    ),
    Guideline(
        title="Jet lag realignment",
        dose="0.5–3 mg at target bedtime in destination time zone",
        insight=(
            "Begin the night you travel east; combine with bright light "
            "exposure at the new morning for best effect."
        ),
    ),
    Guideline(
        title="Shift work transition",
        dose="1–3 mg several hours before desired sleep",
        insight=(
            "Use blackout curtains and minimize caffeine 6 hours prior to "
            "daytime sleep to reinforce the new schedule."
        ),
    ),
)

# =============================================================================
# FAQ
# =============================================================================

FAQ_ITEMS: tuple[FaqItem, ...] = (
    FaqItem(
        question="Is melatonin a sleeping pill?",
        answer=(
            "Melatonin signals that it is night-time; it nudges your circadian "
            "clock and reduces time-to-sleep, but it does not sedate the "
            "nervous system like hypnotic medications."
        ),
    ),
    FaqItem(
        question="Can I take melatonin every night?",
        answer=(
            "Clinical data suggests low doses are safe for short-term nightly "
            "use. For long-term reliance, focus on light hygiene and consistent "
            "bedtimes, and speak with a healthcare professional."
        ),
    ),
    FaqItem(
        question="What are common side effects?",
        answer=(
            "Morning grogginess, vivid dreams, and headaches occur in a "
            "minority of users, typically when the dose is higher than necessary."
        ),
    ),
    FaqItem(
        question="Does melatonin interact with other medications?",
        answer=(
            "Yes. It can potentiate sedatives, impact blood thinners, and alter "
            "glucose regulation. Always review your regimen with a clinician "
            "before adding melatonin."
        ),
    ),
)

# =============================================================================
# Prose Sections
# =============================================================================

PRODUCTION_STEPS: tuple[str, ...] = (
    "Bright morning light anchors the SCN and sets the 24-hour timer.",
    "Dim evenings protect melatonin synthesis by reducing retinal stimulation.",
    "Meal timing, exercise, and social cues fine-tune the rhythm.",
)

FUNCTIONS: tuple[str, ...] = (
    "Sleep: lowers sleep latency and improves perceived sleep quality when "
    "taken before bed.",
    "Circadian phase shifting: useful for jet lag, shift work, and delayed "
    "sleep phase syndrome.",
    "Antioxidant signaling: scavenges free radicals in laboratory models; "
    "clinical impact remains under investigation.",
)

SAFETY_PRACTICES: tuple[str, ...] = (
    "Quality matters: look for third-party testing (USP, NSF, or Informed Choice).",
    "Be consistent: take it at the same time nightly to avoid confusing your "
    "circadian clock.",
    "Combine with behavior: maintain a wind-down routine, cool bedroom, and "
    "reduced evening screen time.",
)

REFERENCES: tuple[Reference, ...] = (
    Reference(
        citation="Arendt J. Melatonin: characteristics, concerns, and prospects.",
        source="Journal of Biological Rhythms (2020)",
    ),
    Reference(
        citation=(
            "Auld F. et al. Evidence for the efficacy of melatonin in "
            "insomnia: systematic review."
        ),
        source="Sleep Medicine Reviews (2017)",
    ),
    Reference(
        citation=(
            "Sack R.L. Clinical practice guideline for the treatment of "
            "circadian rhythm sleep disorders."
        ),
        source="Journal of Clinical Sleep Medicine (2007)",
    ),
)
