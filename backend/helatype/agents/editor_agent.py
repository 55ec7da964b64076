"""
editor_agent.py

Editor orchestrator.
Connects the transliteration engine with the outside collaborators:
- Writing assistant (AI tools, save titles)
- History store (saved text)

The engine itself stays pure. Everything that can fail lives here,
and saving never loses the user's text when the assistant is down.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .writing_assistant import AssistantError, WritingAssistant, get_writing_assistant
from ..config import get_settings
from ..store.history_store import HistoryItem, HistoryStore, get_history_store
from ..utils.transliteration import InputMode, render

logger = logging.getLogger(__name__)

# Tool name -> WritingAssistant method
TOOLS = {
    "grammar": "fix_grammar",
    "formal_letter": "formal_letter",
    "social_post": "social_post",
    "translate": "translate_to_english",
}


@dataclass
class SaveResult:
    """Outcome of a smart save."""
    item: HistoryItem
    label: str
    labelled: bool  # False when the default label was used


class EditorAgent:
    """
    Main orchestrator for the editor.

    Flow:
    1. Render input for the selected mode (Singlish or English)
    2. Run AI tools on the output
    3. Save output to history with an AI title, or a default title
       if the assistant fails
    4. Restore or delete saved items
    """

    def __init__(
        self,
        store: Optional[HistoryStore] = None,
        assistant: Optional[WritingAssistant] = None
    ):
        self.store = store if store is not None else get_history_store()
        self._assistant = assistant
        self.default_label = get_settings().DEFAULT_SAVE_LABEL
        logger.info("[EditorAgent] Initialized")

    @property
    def assistant(self) -> WritingAssistant:
        # Created lazily so the editor works without any LLM configured
        if self._assistant is None:
            self._assistant = get_writing_assistant()
        return self._assistant

    def _tool(self, tool: str) -> Callable[[str], str]:
        return getattr(self.assistant, TOOLS[tool])

    def render(self, text: str, mode: InputMode = InputMode.SINGLISH) -> str:
        return render(text, mode)

    def smart_save(self, text: str) -> SaveResult:
        """
        Save text to history with an AI generated title.

        Args:
            text: Output text to save

        Returns:
            SaveResult with the stored item and its title
        """
        if not text or not text.strip():
            raise ValueError("Nothing to save")

        try:
            label = self.assistant.smart_label(text)
            labelled = True
        except (AssistantError, ValueError) as e:
            # Provider errors must not stop the save
            logger.warning(f"[EditorAgent] Label generation failed, using default: {e}")
            label = self.default_label
            labelled = False

        item = self.store.add(text)
        logger.info(f"[EditorAgent] Saved {item.id} as '{label}'")
        return SaveResult(item=item, label=label, labelled=labelled)

    def run_tool(self, tool: str, text: str) -> str:
        """
        Run one of the AI tools on the output text.

        Raises:
            KeyError: unknown tool
            ValueError: empty text
            AssistantError: the assistant call failed
        """
        if tool not in TOOLS:
            raise KeyError(tool)
        if not text or not text.strip():
            raise ValueError("Write something first")

        logger.info(f"[EditorAgent] Running tool: {tool}")
        return self._tool(tool)(text)

    def restore(self, item_id: str) -> str:
        """Text of a saved item, to load back into the editor."""
        item = self.store.get(item_id)
        if item is None:
            raise KeyError(item_id)
        return item.text

    def delete(self, item_id: str) -> bool:
        return self.store.delete(item_id)


# Singleton
_editor = None

def get_editor_agent() -> EditorAgent:
    """Get or create EditorAgent instance."""
    global _editor
    if _editor is None:
        _editor = EditorAgent()
    return _editor
