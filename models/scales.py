"""
Scale metadata for SONV-112.

Membership of questions is defined in models/questions.py; this module only
names the scales and their subscales, in registry order.
"""

from typing import Dict, List, Tuple

# key -> (name, description, basis, [(subscale_key, subscale_name), ...])
SCALE_METADATA: Dict[str, Tuple[str, str, str, List[Tuple[str, str]]]] = {
    "A": (
        "Inattention",
        "Difficulty sustaining attention, organising tasks and keeping track of everyday things.",
        "DSM-5 ADHD criterion A1, ASRS v1.1",
        [("A1", "Sustained attention"), ("A2", "Organisation and planning"), ("A3", "Forgetfulness")],
    ),
    "B": (
        "Hyperactivity and impulsivity",
        "Inner and outer restlessness, difficulty waiting and acting before thinking.",
        "DSM-5 ADHD criterion A2, ASRS v1.1",
        [("B1", "Motor restlessness"), ("B2", "Impulsivity")],
    ),
    "C": (
        "Emotional dysregulation",
        "Intense, fast-changing emotions and difficulty returning to a calm state.",
        "Adult ADHD emotional dysregulation research, DERS",
        [],
    ),
    "D": (
        "Social communication",
        "Differences in reading social cues and in the flow of conversation.",
        "DSM-5 ASD criterion A, RAADS-R, AQ-50",
        [("D1", "Social intuition"), ("D2", "Conversation and reciprocity")],
    ),
    "E": (
        "Routines and focused interests",
        "Preference for sameness, repetitive behaviour and intense, narrow interests.",
        "DSM-5 ASD criterion B1-B3, RAADS-R",
        [("E1", "Routines and sameness"), ("E2", "Focused interests")],
    ),
    "F": (
        "Sensory processing",
        "Over- or under-responsiveness to sound, light, touch, smell and taste.",
        "DSM-5 ASD criterion B4, Adult Sensory Profile",
        [("F1", "Sensory over-responsiveness"), ("F2", "Sensory seeking and under-responsiveness")],
    ),
    "G": (
        "Camouflaging",
        "Effort spent masking or compensating for differences in social situations.",
        "CAT-Q",
        [],
    ),
    "H": (
        "Reading and writing difficulties",
        "Slow or effortful reading, spelling errors and difficulty with written expression.",
        "Adult Dyslexia Checklist",
        [],
    ),
    "I": (
        "Number difficulties",
        "Difficulty with mental arithmetic, number sense and estimating quantities.",
        "Adult dyscalculia screening items",
        [],
    ),
    "J": (
        "Motor coordination",
        "Clumsiness, fine motor difficulties and trouble learning movement sequences.",
        "Adult DCD/Dyspraxia Checklist",
        [],
    ),
    "L": (
        "Social desirability",
        "Tendency to present oneself in an unrealistically favourable light.",
        "MMPI L-scale principle",
        [],
    ),
    "M": (
        "Attentive responding",
        "Endorsement of impossible statements, typical of random or careless answering.",
        "Infrequency scale principle",
        [],
    ),
    "K": (
        "Response consistency",
        "Disagreement between answers to pairs of near-identical statements.",
        "MMPI VRIN principle",
        [],
    ),
    "N": (
        "Acquiescence",
        "Agreeing with statements regardless of their content, including contradictory ones.",
        "MMPI TRIN principle",
        [],
    ),
}
