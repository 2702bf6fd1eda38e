"""
SONV-112 question bank.

Each entry is (question_id, scale_key, subscale_key, text). Ids are the
positions used by share codes: never renumber or reorder existing items.
Control items (scales L, M, K, N) are interleaved at every eighth position.
"""

from typing import Dict, FrozenSet, List, Optional, Tuple

QuestionRow = Tuple[int, str, Optional[str], str]

QUESTIONS: List[QuestionRow] = [
    # 0-14: inattention, with control items at 7 and 15
    (0, "A", "A1", "My attention drifts away during long conversations or lectures, even when the topic matters to me."),
    (1, "A", "A1", "I make careless mistakes when a task is boring or repetitive."),
    (2, "A", "A1", "I find it hard to keep my mind on reading for more than a few pages."),
    (3, "A", "A1", "Background sounds or movement easily pull my attention away from what I am doing."),
    (4, "A", "A1", "I start listening to someone and realise I have missed what they said."),
    (5, "A", "A2", "I put off starting tasks that require sustained mental effort."),
    (6, "A", "A2", "I have trouble organising the steps of a project in the right order."),
    (7, "L", None, "I have never been late for anything in my life."),
    (8, "A", "A2", "I underestimate how long things will take and end up running late."),
    (9, "A", "A2", "My living or working space becomes cluttered even though I intend to keep it tidy."),
    (10, "A", "A2", "I leave several tasks half-finished and move on to something new."),
    (11, "A", "A3", "I misplace keys, phone, wallet or documents."),
    (12, "A", "A3", "I forget appointments, deadlines or promises unless I set reminders."),
    (13, "A", "A3", "I walk into a room and forget why I came."),
    (14, "A", "A3", "I forget what I was about to say in the middle of a sentence."),
    (15, "K", None, "Keeping my focus while reading a long text is difficult for me."),
    # 16-28: hyperactivity and impulsivity
    (16, "B", "B1", "I fidget with my hands or feet, or squirm in my seat."),
    (17, "B", "B1", "I feel restless when I have to sit still for a long time."),
    (18, "B", "B1", "I feel driven, as if by a motor, and find it hard to slow down."),
    (19, "B", "B1", "I find it hard to relax and unwind in my free time."),
    (20, "B", "B1", "I pace, tap or shake my leg without noticing it."),
    (21, "B", "B1", "I choose activities that keep me moving over ones where I sit still."),
    (22, "B", "B2", "I finish other people's sentences or answer before a question is complete."),
    (23, "M", None, "I have never in my life seen a clock or a watch."),
    (24, "B", "B2", "I find it hard to wait my turn in queues or conversations."),
    (25, "B", "B2", "I interrupt others when they are busy or talking."),
    (26, "B", "B2", "I make impulsive purchases or decisions that I later regret."),
    (27, "B", "B2", "I say things without thinking and then wish I had not."),
    (28, "B", "B2", "I talk more than others in social situations."),
    # 29-37: emotional regulation
    (29, "C", None, "My mood can change sharply several times a day."),
    (30, "C", None, "Small frustrations make me disproportionately angry."),
    (31, "N", None, "I prefer spending my evenings at home."),
    (32, "C", None, "Criticism or perceived rejection hurts me intensely and for a long time."),
    (33, "C", None, "Once upset, it takes me a long time to calm down."),
    (34, "C", None, "I react emotionally before I have had time to think."),
    (35, "C", None, "I feel overwhelmed by emotions that others seem to handle easily."),
    (36, "C", None, "I get bored quickly and feel irritable when nothing is happening."),
    (37, "C", None, "I cry or lose my temper more easily than people around me."),
    # 38-53: social communication
    (38, "D", "D1", "I find it hard to tell what people are feeling from their facial expressions."),
    (39, "L", None, "I have never said anything unkind about another person."),
    (40, "D", "D1", "I miss hints, sarcasm or unspoken meanings that others seem to catch."),
    (41, "D", "D1", "I am unsure about unwritten social rules, for example how close to stand or when to leave."),
    (42, "D", "D1", "I find it hard to tell whether someone is interested in me or just being polite."),
    (43, "D", "D1", "I take statements literally and later realise they were meant differently."),
    (44, "D", "D1", "I do not understand why some of my remarks offend people."),
    (45, "D", "D1", "Making and keeping friends takes a lot of conscious effort from me."),
    (46, "D", "D2", "I find small talk pointless or exhausting."),
    (47, "N", None, "I like summer more than winter."),
    (48, "D", "D2", "I don't know when it is my turn to speak in a group conversation."),
    (49, "D", "D2", "People tell me I talk for too long about topics that interest me."),
    (50, "D", "D2", "Keeping eye contact during a conversation feels uncomfortable or unnatural."),
    (51, "D", "D2", "I find it hard to start a conversation with someone I don't know."),
    (52, "D", "D2", "Others misread my tone of voice or facial expression."),
    (53, "D", "D2", "I prefer written communication to talking face to face or on the phone."),
    # 54-65: routines, repetitive behaviour and focused interests
    (54, "E", "E1", "Unexpected changes to my plans make me anxious or upset."),
    (55, "K", None, "I am often unsure about unspoken social rules, such as how close to stand to someone."),
    (56, "E", "E1", "I follow the same routines every day and dislike deviating from them."),
    (57, "E", "E1", "I eat the same foods or take the same route again and again."),
    (58, "E", "E1", "I need to know in detail what will happen before I go somewhere new."),
    (59, "E", "E1", "I repeat certain movements or sounds, such as rocking, humming or tapping, to calm myself."),
    (60, "E", "E2", "I have interests that absorb me so intensely that I lose track of time."),
    (61, "E", "E2", "I collect detailed information or facts about my favourite topics."),
    (62, "E", "E2", "I notice small details, patterns or numbers that other people overlook."),
    (63, "M", None, "I can breathe underwater without any equipment."),
    (64, "E", "E2", "It is hard for me to switch my attention from my interest to something else."),
    (65, "E", "E2", "My interests are unusual for my age or more intense than other people's."),
    # 66-76: sensory processing
    (66, "F", "F1", "Everyday sounds such as a ticking clock or a humming fridge bother me a lot."),
    (67, "F", "F1", "Bright or flickering light is unpleasant or painful for me."),
    (68, "F", "F1", "Certain fabrics, labels or seams on clothes are unbearable to me."),
    (69, "F", "F1", "Strong smells make me feel unwell or irritated."),
    (70, "F", "F1", "Crowded, noisy places overload me quickly."),
    (71, "L", None, "I have always kept every promise I have made."),
    (72, "F", "F1", "I avoid certain food textures."),
    (73, "F", "F2", "I don't notice pain, cold or hunger until they become intense."),
    (74, "F", "F2", "I seek out intense sensations such as deep pressure, spinning or loud music."),
    (75, "F", "F2", "I touch or smell objects to explore them more than other people do."),
    (76, "F", None, "After a day full of sensory input I need time alone to recover."),
    # 77-85: camouflaging
    (77, "G", None, "I copy other people's gestures, phrases or behaviour to fit in."),
    (78, "G", None, "I rehearse conversations in my head before they happen."),
    (79, "N", None, "I prefer spending my evenings out of the house."),
    (80, "G", None, "I force myself to make eye contact because it is expected."),
    (81, "G", None, "I hide my interests or habits so that I don't seem strange."),
    (82, "G", None, "I play a role in social situations rather than being myself."),
    (83, "G", None, "After socialising I feel exhausted from keeping up appearances."),
    (84, "G", None, "I have learned social rules from books, films or observation and follow them deliberately."),
    (85, "G", None, "I monitor my facial expression and body language so that I look 'normal'."),
    # 86-94: reading and writing
    (86, "H", None, "I read more slowly than other people with my level of education."),
    (87, "K", None, "My interests can absorb me so completely that I forget about time."),
    (88, "H", None, "I have to re-read a text several times to understand it."),
    (89, "H", None, "Letters or words seem to swap, blur or move when I read."),
    (90, "H", None, "I make spelling mistakes even in familiar words."),
    (91, "H", None, "Reading aloud in front of others is hard for me."),
    (92, "H", None, "I confuse similar-looking letters or words, such as b/d or 'form' and 'from'."),
    (93, "H", None, "I find it hard to put my thoughts into well-structured written text."),
    (94, "H", None, "I lose my place on the page when reading."),
    # 95-102: numbers and quantities
    (95, "M", None, "I have visited every country in the world during the past month."),
    (96, "I", None, "Mental arithmetic, such as working out change, is hard for me."),
    (97, "I", None, "I mix up digits when writing down phone numbers or codes."),
    (98, "I", None, "I find it hard to estimate quantities, distances or time intervals."),
    (99, "I", None, "Reading analogue clocks or timetables is difficult for me."),
    (100, "I", None, "I avoid tasks that involve numbers, budgets or tables."),
    (101, "I", None, "I count on my fingers for simple sums."),
    (102, "I", None, "I struggle to remember multiplication facts or number sequences."),
    # 103-111: motor coordination
    (103, "L", None, "I have never felt envious of anyone."),
    (104, "J", None, "I bump into furniture or door frames more often than other people."),
    (105, "J", None, "I drop things or spill drinks."),
    (106, "J", None, "Fine motor tasks such as tying laces, buttoning or handwriting are hard for me."),
    (107, "J", None, "Learning new movement sequences, such as dance steps or sports drills, takes me longer than others."),
    (108, "J", None, "My handwriting is untidy or hard to read."),
    (109, "J", None, "I find it hard to judge distances when parking, catching a ball or pouring a drink."),
    (110, "J", None, "I mix up left and right."),
    (111, "N", None, "I like winter more than summer."),
]

# Inconsistency items (scale K) and the earlier item each one restates.
# K scores the absolute difference between the two answers.
MIRRORED_ITEMS: Dict[int, int] = {
    15: 2,
    55: 41,
    87: 60,
}

# All items are keyed in the trait direction.
REVERSE_SCORED_ITEMS: FrozenSet[int] = frozenset()
