"""Prompt builders shared across services."""

WRITER_ASSISTANT_NAME = "MindScape Writer"
BRAINSTORM_ASSISTANT_NAME = "MindScape Muse"


def build_writer_assistant_prompt() -> str:
    return (
        "You are an editorial assistant for a personal knowledge base. "
        "Follow each instruction exactly and reply with the requested text only, "
        "without preamble or commentary."
    )


def build_brainstorm_system_prompt() -> str:
    return (
        "You are a creative muse and editorial assistant for a personal blogger. "
        "Help them brainstorm topics, outline articles, and refine their ideas. "
        "Be encouraging, insightful, and ask thought-provoking questions."
    )


def build_summary_prompt(content: str) -> str:
    return (
        "Please provide a concise, 2-sentence summary of the following blog post content. "
        "Capture the main insight or learning point:\n\n"
        f"{content}"
    )


def build_polish_prompt(content: str) -> str:
    return (
        "Rewrite the following text to be more clear, concise, and professional, "
        "while maintaining the original meaning and tone. Return only the rewritten text:\n\n"
        f"{content}"
    )
