"""
Pre-authored narrative templates and rule tables.

Everything the interpretation layer says comes from here: the engine only
selects rows. Tables are ordered; output follows table order.
"""

from typing import Dict, List, Tuple

from .enums import Confidence, ConditionKey, WarningType

# ---------------------------------------------------------------------------
# Validity warnings: (scale_key, type) -> (icon, title, text)
# ---------------------------------------------------------------------------

VALIDITY_WARNINGS: Dict[Tuple[str, WarningType], Tuple[str, str, str]] = {
    ("L", WarningType.CRITICAL): (
        "⛔",
        "Strongly idealised self-description",
        "Many answers describe an unrealistically flawless person. Scores on the other "
        "scales are probably underestimated and cannot be interpreted reliably.",
    ),
    ("L", WarningType.MODERATE): (
        "⚠️",
        "Tendency to answer in a socially desirable way",
        "Some answers present you in a more favourable light than is typical. "
        "Trait scores may be somewhat lower than your actual experience.",
    ),
    ("M", WarningType.CRITICAL): (
        "⛔",
        "Signs of random or careless answering",
        "Several impossible statements were endorsed. The answer pattern looks random, "
        "so the results cannot be interpreted.",
    ),
    ("M", WarningType.MODERATE): (
        "⚠️",
        "Possible lapses of attention while answering",
        "At least one impossible statement was endorsed. Some answers may have been given "
        "hastily; read the results with this in mind.",
    ),
    ("K", WarningType.CRITICAL): (
        "⛔",
        "Highly inconsistent answers",
        "Answers to pairs of almost identical statements contradict each other. "
        "The results do not form a reliable profile.",
    ),
    ("K", WarningType.MODERATE): (
        "⚠️",
        "Some inconsistency between similar statements",
        "A few near-identical statements received noticeably different answers. "
        "Borderline results deserve extra caution.",
    ),
    ("N", WarningType.CRITICAL): (
        "⛔",
        "Agreement regardless of content",
        "Contradictory statements were both strongly endorsed. Elevated scores may reflect "
        "a general tendency to agree rather than actual traits.",
    ),
    ("N", WarningType.MODERATE): (
        "⚠️",
        "Tendency to agree with statements",
        "Contradictory statements received fairly high agreement. Elevated scores may be "
        "partly inflated.",
    ),
}

# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------

CONDITION_TITLES: Dict[ConditionKey, str] = {
    ConditionKey.ADHD: "ADHD traits",
    ConditionKey.ASD: "Autistic traits",
    ConditionKey.DYSLEXIA: "Dyslexia traits",
    ConditionKey.DYSCALCULIA: "Dyscalculia traits",
    ConditionKey.DYSPRAXIA: "Dyspraxia (DCD) traits",
}

CONDITION_NOUNS: Dict[ConditionKey, str] = {
    ConditionKey.ADHD: "attention and activity regulation difficulties",
    ConditionKey.ASD: "autistic traits",
    ConditionKey.DYSLEXIA: "reading and writing difficulties",
    ConditionKey.DYSCALCULIA: "difficulties with numbers",
    ConditionKey.DYSPRAXIA: "motor coordination difficulties",
}

PRESENT_TEXTS: Dict[Tuple[ConditionKey, Confidence], str] = {
    (ConditionKey.ADHD, Confidence.HIGH): (
        "Your answers show a consistent pattern of attention, activity and impulse regulation "
        "difficulties across all areas measured. This profile is typical of adults with ADHD "
        "and is worth discussing with a psychiatrist or clinical psychologist."
    ),
    (ConditionKey.ADHD, Confidence.MODERATE): (
        "The overall level of ADHD-related traits is above the screening threshold, but it is "
        "driven mainly by one or two areas while others stay low. A specialist can help tell "
        "ADHD apart from stress, sleep problems or anxiety with a similar picture."
    ),
    (ConditionKey.ADHD, Confidence.LOW): (
        "ADHD-related traits are just above the screening threshold. The result is borderline: "
        "it may reflect ADHD, but also temporary overload or other factors."
    ),
    (ConditionKey.ASD, Confidence.HIGH): (
        "Your answers show consistent differences in social communication, need for "
        "predictability and sensory processing. This combination is characteristic of the "
        "autistic profile; a diagnostic assessment by an experienced specialist is advisable."
    ),
    (ConditionKey.ASD, Confidence.MODERATE): (
        "Autistic traits are above the screening threshold overall, but they are concentrated "
        "in some areas rather than spread evenly. Social anxiety, sensory sensitivity or "
        "ADHD can produce a similar partial picture."
    ),
    (ConditionKey.ASD, Confidence.LOW): (
        "Autistic traits are just above the screening threshold. A borderline result is common "
        "in people who have learned to compensate; a specialist can clarify it."
    ),
    (ConditionKey.DYSLEXIA, Confidence.HIGH): (
        "Reading and writing are consistently effortful for you. The pattern matches adult "
        "dyslexia; an educational psychologist can confirm it and suggest accommodations."
    ),
    (ConditionKey.DYSLEXIA, Confidence.MODERATE): (
        "Reading and writing difficulties are above the threshold but limited to some "
        "situations. They may also be related to attention or visual fatigue."
    ),
    (ConditionKey.DYSLEXIA, Confidence.LOW): (
        "Reading and writing difficulties are just above the threshold. Consider whether they "
        "have been present since school age."
    ),
    (ConditionKey.DYSCALCULIA, Confidence.HIGH): (
        "Working with numbers is consistently hard for you, from arithmetic to estimating "
        "time and quantities. The pattern matches adult dyscalculia."
    ),
    (ConditionKey.DYSCALCULIA, Confidence.MODERATE): (
        "Number difficulties are above the threshold but concentrated in a few tasks. Maths "
        "anxiety or attention difficulties can produce a similar picture."
    ),
    (ConditionKey.DYSCALCULIA, Confidence.LOW): (
        "Number difficulties are just above the threshold. The result is borderline."
    ),
    (ConditionKey.DYSPRAXIA, Confidence.HIGH): (
        "Coordination, fine motor skills and learning new movements are consistently hard for "
        "you. The pattern matches developmental coordination disorder (dyspraxia)."
    ),
    (ConditionKey.DYSPRAXIA, Confidence.MODERATE): (
        "Motor coordination difficulties are above the threshold but limited to some tasks. "
        "Attention lapses can also make people seem clumsy."
    ),
    (ConditionKey.DYSPRAXIA, Confidence.LOW): (
        "Motor coordination difficulties are just above the threshold. The result is borderline."
    ),
}

ABSENT_TEXTS: Dict[Confidence, str] = {
    Confidence.HIGH: (
        "Your answers do not indicate {noun} beyond the range typical for adults."
    ),
    Confidence.MODERATE: (
        "The overall level of {noun} is below the screening threshold, but one area stands "
        "out. See the details below."
    ),
    Confidence.LOW: (
        "The level of {noun} is just below the screening threshold. A borderline result like "
        "this is worth revisiting if everyday difficulties persist."
    ),
}

# (condition, source, minimum percentage, title, text)
# source is a scale key ("A") or scale.subscale ("A.A2")
DETAIL_RULES: List[Tuple[ConditionKey, str, int, str, str]] = [
    (
        ConditionKey.ADHD, "A", 60,
        "Inattentive features",
        "Difficulties with sustained attention, organisation and memory for everyday tasks "
        "are pronounced.",
    ),
    (
        ConditionKey.ADHD, "B", 60,
        "Hyperactive-impulsive features",
        "Inner restlessness and acting before thinking are pronounced. In adults hyperactivity "
        "often feels like a constant inner motor rather than visible running around.",
    ),
    (
        ConditionKey.ADHD, "A.A2", 60,
        "Executive function",
        "Planning, starting and finishing tasks take disproportionate effort. External "
        "structure such as lists, timers and body doubling usually helps.",
    ),
    (
        ConditionKey.ADHD, "C", 60,
        "Emotional dysregulation",
        "Emotions are intense and fade slowly. Emotional dysregulation frequently accompanies "
        "adult ADHD even though it is not part of the formal criteria.",
    ),
    (
        ConditionKey.ASD, "D", 60,
        "Social communication differences",
        "Reading social cues and following the unwritten rules of conversation require "
        "conscious effort.",
    ),
    (
        ConditionKey.ASD, "E", 60,
        "Need for predictability and focused interests",
        "Routines provide stability and interests are deep and absorbing. Unexpected change "
        "can be genuinely distressing.",
    ),
    (
        ConditionKey.ASD, "F", 60,
        "Sensory processing differences",
        "Sensory input is processed differently, which can lead to overload in busy "
        "environments.",
    ),
    (
        ConditionKey.ASD, "G", 60,
        "Camouflaging",
        "You invest a lot of effort in masking. Masking can lower scores on the other autistic "
        "scales, so your actual trait level may be higher than shown.",
    ),
    (
        ConditionKey.DYSLEXIA, "H", 80,
        "Strongly pronounced reading difficulties",
        "Text-to-speech, audiobooks and extra time for written tasks are common and effective "
        "accommodations.",
    ),
    (
        ConditionKey.DYSCALCULIA, "I", 80,
        "Strongly pronounced number difficulties",
        "Calculators, budgeting apps and written step-by-step procedures reduce the load of "
        "everyday number tasks.",
    ),
    (
        ConditionKey.DYSPRAXIA, "J", 80,
        "Strongly pronounced coordination difficulties",
        "Occupational therapy and adapted tools, such as ergonomic pens or a keyboard instead "
        "of handwriting, can help.",
    ),
]

# ---------------------------------------------------------------------------
# Comorbidity: one row per pair of conditions plus wider combinations;
# a row is emitted when all of its conditions are present
# ---------------------------------------------------------------------------

COMORBIDITY_TABLE: List[Dict] = [
    {
        "key": "adhd_asd",
        "conditions": (ConditionKey.ADHD, ConditionKey.ASD),
        "title": "ADHD and autistic traits together (AuDHD)",
        "text": (
            "Both profiles are pronounced. They co-occur often, and each can mask or "
            "exaggerate features of the other."
        ),
        "interactions": [
            (
                "Routine versus novelty",
                "The autistic need for predictability clashes with the ADHD pull towards "
                "novelty. Routines help but get boring; variety energises but overwhelms.",
            ),
            (
                "Scattered and hyperfocused attention",
                "Attention may drift on uninteresting tasks and lock onto interesting ones "
                "for hours. Both come from the same difficulty regulating attention.",
            ),
            (
                "Sensory load and restlessness",
                "Sensory overload and inner restlessness amplify each other, making busy "
                "environments especially draining.",
            ),
        ],
    },
    {
        "key": "adhd_dyslexia",
        "conditions": (ConditionKey.ADHD, ConditionKey.DYSLEXIA),
        "title": "ADHD and reading difficulties",
        "text": (
            "Attention difficulties and effortful reading reinforce each other: reading takes "
            "more effort, so attention runs out sooner."
        ),
        "interactions": [
            (
                "Reading fatigue",
                "Short reading sessions, audio formats and highlighting help keep both "
                "attention and comprehension up.",
            ),
        ],
    },
    {
        "key": "adhd_dyscalculia",
        "conditions": (ConditionKey.ADHD, ConditionKey.DYSCALCULIA),
        "title": "ADHD and number difficulties",
        "text": (
            "Working memory limits linked to ADHD make multi-step calculations even harder "
            "when number sense is already weak."
        ),
        "interactions": [
            (
                "Everyday finances",
                "Impulsive spending combined with difficulty tracking numbers raises the risk "
                "of money problems; automated budgeting helps.",
            ),
        ],
    },
    {
        "key": "adhd_dyspraxia",
        "conditions": (ConditionKey.ADHD, ConditionKey.DYSPRAXIA),
        "title": "ADHD and coordination difficulties",
        "text": (
            "Clumsiness can come from both motor planning and attention lapses. Together they "
            "make accidents and dropped objects more frequent."
        ),
        "interactions": [],
    },
    {
        "key": "asd_dyslexia",
        "conditions": (ConditionKey.ASD, ConditionKey.DYSLEXIA),
        "title": "Autistic traits and reading difficulties",
        "text": (
            "Literal reading of text and effortful decoding can combine, so written "
            "instructions may take longer to process and be understood differently than intended."
        ),
        "interactions": [
            (
                "Written communication",
                "Written messages are often the preferred channel for autistic people, yet "
                "reading them costs extra effort. Text-to-speech keeps the channel usable.",
            ),
        ],
    },
    {
        "key": "asd_dyscalculia",
        "conditions": (ConditionKey.ASD, ConditionKey.DYSCALCULIA),
        "title": "Autistic traits and number difficulties",
        "text": (
            "Difficulty with numbers sits alongside a preference for predictability, which can "
            "make money, time and schedules a steady source of stress."
        ),
        "interactions": [],
    },
    {
        "key": "asd_dyspraxia",
        "conditions": (ConditionKey.ASD, ConditionKey.DYSPRAXIA),
        "title": "Autistic traits and coordination difficulties",
        "text": (
            "Motor coordination differences are common in autistic adults and add to the "
            "effort of sports, handwriting and other physical tasks."
        ),
        "interactions": [
            (
                "Sensory and motor load",
                "Sensory sensitivity and motor planning difficulties together can make new "
                "physical environments especially tiring.",
            ),
        ],
    },
    {
        "key": "dyslexia_dyscalculia",
        "conditions": (ConditionKey.DYSLEXIA, ConditionKey.DYSCALCULIA),
        "title": "Reading and number difficulties",
        "text": (
            "Difficulties with both written language and numbers point to a broader learning "
            "profile that an educational psychologist can assess as a whole."
        ),
        "interactions": [],
    },
    {
        "key": "dyslexia_dyspraxia",
        "conditions": (ConditionKey.DYSLEXIA, ConditionKey.DYSPRAXIA),
        "title": "Reading and coordination difficulties",
        "text": (
            "Reading difficulties and motor coordination difficulties often occur together and "
            "both make handwriting and note-taking slow and tiring."
        ),
        "interactions": [
            (
                "Writing by hand",
                "Typing, dictation and recorded lectures reduce the combined load of spelling "
                "and fine motor control.",
            ),
        ],
    },
    {
        "key": "dyscalculia_dyspraxia",
        "conditions": (ConditionKey.DYSCALCULIA, ConditionKey.DYSPRAXIA),
        "title": "Number and coordination difficulties",
        "text": (
            "Number sense and spatial judgement share common ground, so estimating distances, "
            "quantities and directions can be hard in everyday tasks."
        ),
        "interactions": [],
    },
    {
        "key": "learning_triad",
        "conditions": (ConditionKey.DYSLEXIA, ConditionKey.DYSCALCULIA, ConditionKey.DYSPRAXIA),
        "title": "Several specific learning differences",
        "text": (
            "Reading, number and coordination difficulties are all pronounced. A comprehensive "
            "neuropsychological assessment is more useful than testing each area separately."
        ),
        "interactions": [],
    },
]

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

SUMMARY_DISCLAIMER = (
    "Screening result, not a diagnosis. Only a qualified specialist can confirm or rule out "
    "a condition."
)

SUMMARY_STATUS: Dict[bool, str] = {
    True: "pronounced",
    False: "not pronounced",
}

COMORBIDITY_NOTE = (
    "Co-occurring traits: {titles}. Their combination changes how each one shows up; see the "
    "combined profile below."
)

INVALID_SUMMARY = (
    "Detailed interpretation is withheld because response reliability is low. Retake the "
    "questionnaire answering as candidly as possible, or discuss your answers with a "
    "specialist in a clinical interview."
)

# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

# Conditions per rule (all must hold):
#   scales        - {source: minimum percentage}
#   present       - conditions that must be present
#   absent        - conditions that must be absent
#   min_present   - minimum number of present conditions
#   validity_moderate - at least one moderate validity warning
FLAG_RULES: List[Dict] = [
    {
        "scales": {"C": 60},
        "flag": (
            "🌊",
            "Pronounced emotional dysregulation",
            "Intense emotional reactions can affect relationships and wellbeing regardless "
            "of any diagnosis. Emotion regulation skills are learnable and worth support.",
        ),
    },
    {
        "scales": {"G": 60},
        "flag": (
            "🎭",
            "High camouflaging",
            "Constant masking is exhausting and is linked to burnout, anxiety and depression. "
            "Plan recovery time after social situations.",
        ),
    },
    {
        "scales": {"G": 60},
        "absent": [ConditionKey.ASD],
        "flag": (
            "🔍",
            "Masking may hide autistic traits",
            "Camouflaging is high while autistic traits are below the threshold. Masking "
            "lowers self-reported traits, so a specialist assessment can still be useful.",
        ),
    },
    {
        "scales": {"F.F1": 80},
        "flag": (
            "🔊",
            "Strong sensory over-responsiveness",
            "Everyday sensory input is very intense for you. Noise-cancelling headphones, "
            "sunglasses and quiet breaks can reduce overload.",
        ),
    },
    {
        "scales": {"B.B2": 80},
        "flag": (
            "⚡",
            "Strongly pronounced impulsivity",
            "Impulsive decisions can have financial and safety consequences. A pause rule "
            "before large purchases or commitments helps.",
        ),
    },
    {
        "min_present": 3,
        "flag": (
            "🧩",
            "Complex profile",
            "Three or more areas are above the screening threshold. A comprehensive "
            "assessment by a multidisciplinary team is recommended.",
        ),
    },
    {
        "validity_moderate": True,
        "flag": (
            "⚠️",
            "Interpret with caution",
            "Control scales show a moderate response bias. The results are usable but "
            "borderline conclusions are less certain.",
        ),
    },
]

# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

BASE_DO: List[str] = [
    "Save or share your result link so you can return to it or show it to a specialist.",
    "Note concrete everyday situations where the difficulties show up; they are more useful "
    "to a specialist than scores alone.",
]

BASE_DONT: List[str] = [
    "Don't treat this screening as a diagnosis, in either direction.",
    "Don't start or stop any medication based on these results.",
]

CONDITION_DO: Dict[ConditionKey, List[str]] = {
    ConditionKey.ADHD: [
        "Consider an assessment by a psychiatrist experienced with adult ADHD.",
        "Try external structure: calendars, reminders, timers and visible to-do lists.",
    ],
    ConditionKey.ASD: [
        "Look for a specialist experienced in assessing autistic adults, including those who mask.",
        "Plan quiet recovery time after demanding social or sensory situations.",
    ],
    ConditionKey.DYSLEXIA: [
        "Ask an educational psychologist about a dyslexia assessment.",
        "Use text-to-speech, audiobooks and dyslexia-friendly fonts.",
    ],
    ConditionKey.DYSCALCULIA: [
        "Ask an educational psychologist about a dyscalculia assessment.",
        "Use calculators and budgeting apps for everyday number tasks.",
    ],
    ConditionKey.DYSPRAXIA: [
        "Consider an occupational therapy assessment for coordination difficulties.",
        "Give yourself extra time to learn new physical routines.",
    ],
}

CONDITION_DONT: Dict[ConditionKey, List[str]] = {
    ConditionKey.ADHD: [
        "Don't rely on willpower alone to fix attention problems.",
    ],
    ConditionKey.ASD: [
        "Don't force yourself into constant social activity to appear typical.",
    ],
    ConditionKey.DYSLEXIA: [
        "Don't judge your intelligence by reading speed.",
    ],
    ConditionKey.DYSCALCULIA: [
        "Don't avoid financial matters; automate them instead.",
    ],
    ConditionKey.DYSPRAXIA: [
        "Don't blame yourself for clumsiness.",
    ],
}

SPECIALIST_NOTE = "{title}: {percentage}% of maximum, {status}, {confidence}."
COMORBIDITY_SPECIALIST_NOTE = "Co-occurrence to consider in differential diagnosis: {title}."
VALIDITY_SPECIALIST_NOTE = "Control scale '{scale}' ({percentage}%): {title}."

INVALID_RECOMMENDATIONS = {
    "do_list": [
        "Retake the questionnaire when you have enough time, answering as candidly as possible.",
        "If you want to explore these questions further, ask a specialist for a clinical interview.",
    ],
    "dont_list": [
        "Don't draw conclusions from the scale scores of this attempt.",
    ],
}
