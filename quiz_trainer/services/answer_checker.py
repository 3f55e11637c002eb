def matches(user_answer: str, correct: str) -> bool:
    """Check if the user's answer equals the stored one, ignoring case and surrounding spaces."""
    return _normalize(user_answer) == _normalize(correct)


def _normalize(text: str) -> str:
    """Normalize text for comparison: strip, uppercase."""
    return (text or "").strip().upper()
