"""
Scoring Taxonomies - Static lookup data

Contains:
- Stopwords (for keyword extraction)
- Section map (which skill sections a question type contributes to)
- Feedback messages (fixed wording used by the feedback generator)
"""

# ==================== KEYWORD EXTRACTION ====================

STOPWORDS = frozenset([
    'a', 'an', 'the', 'in', 'on', 'at', 'to', 'for', 'of', 'and',
    'but', 'so', 'is', 'are', 'was', 'were', 'this', 'that'
])

# Words this short never count as keywords
KEYWORD_MIN_LENGTH = 4

# ==================== SECTION MAP ====================

SPEAKING = 'speaking'
WRITING = 'writing'
READING = 'reading'
LISTENING = 'listening'

SECTIONS = (SPEAKING, WRITING, READING, LISTENING)

# Integrated question types credit more than one section; the score is
# divided equally between the sections listed.
SECTION_MAP = {
    # Speaking
    'read_aloud': (SPEAKING, READING),
    'repeat_sentence': (SPEAKING, LISTENING),
    # Writing
    'summarize_written_text': (READING, WRITING),
    'write_essay': (WRITING,),
    # Reading
    'fib_dropdown': (READING, WRITING),
    'fib_drag_drop': (READING,),
    'multiple_choice_multiple': (READING,),
    'reorder_paragraphs': (READING,),
    'multiple_choice_single': (READING, LISTENING),
    # Listening
    'summarize_spoken_text': (LISTENING, WRITING),
    'listening_fib': (LISTENING, WRITING),
    'highlight_correct_summary': (READING, LISTENING),
    'select_missing_word': (READING, LISTENING),
    'highlight_incorrect_words': (LISTENING, READING),
    'write_from_dictation': (LISTENING, WRITING),
}

# ==================== FEEDBACK ====================

FEEDBACK_MESSAGES = {
    'speaking': {
        'excellent': "Excellent work! Your reading was clear and fluent.",
        'good': "Good effort. Keep practicing to improve flow and clarity.",
        'needs_practice': "You might need more practice. Focus on saying each word clearly.",
    },
    'general': {
        'excellent': "Excellent work! Almost everything was correct.",
        'good': "Good effort. Review the items you missed and try again.",
        'needs_practice': "You might need more practice. Go through the answer key carefully.",
    },
    'fluency': "Try to speak at a steady pace without long pauses.",
    'pronunciation': "Some words were hard to recognize. Check the red words below.",
    'completeness': "It seems you missed a significant portion of the text.",
}
