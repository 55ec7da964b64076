import sys
import os
import pytest
from unittest.mock import MagicMock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../backend')))

from helatype.agents.editor_agent import EditorAgent
from helatype.agents.writing_assistant import AssistantError
from helatype.store.history_store import InMemoryHistoryStore
from helatype.utils.transliteration import InputMode


@pytest.fixture
def assistant():
    return MagicMock()


@pytest.fixture
def agent(assistant):
    return EditorAgent(store=InMemoryHistoryStore(), assistant=assistant)


def test_render(agent):
    assert agent.render("amma") == "අම්ම"
    assert agent.render("amma", InputMode.ENGLISH) == "amma"


def test_smart_save_with_label(agent, assistant):
    assistant.smart_label.return_value = "අම්මා ගැන"

    result = agent.smart_save("අම්ම")

    assert result.labelled is True
    assert result.label == "අම්මා ගැන"
    assert agent.store.list_items() == [result.item]
    assistant.smart_label.assert_called_once_with("අම්ම")


def test_smart_save_falls_back_when_assistant_fails(agent, assistant):
    assistant.smart_label.side_effect = AssistantError("quota exceeded")

    result = agent.smart_save("අම්ම")

    assert result.labelled is False
    assert result.label == agent.default_label
    assert result.item.text == "අම්ම"
    assert len(agent.store) == 1


def test_smart_save_rejects_blank_text(agent, assistant):
    with pytest.raises(ValueError):
        agent.smart_save("   ")
    assistant.smart_label.assert_not_called()
    assert len(agent.store) == 0


def test_run_tool(agent, assistant):
    assistant.fix_grammar.return_value = "නිවැරදි"
    assistant.translate_to_english.return_value = "Mother"

    assert agent.run_tool("grammar", "වැරදි") == "නිවැරදි"
    assert agent.run_tool("translate", "අම්ම") == "Mother"
    assistant.fix_grammar.assert_called_once_with("වැරදි")


def test_run_tool_unknown(agent):
    with pytest.raises(KeyError):
        agent.run_tool("poem", "අම්ම")


def test_run_tool_blank_text(agent, assistant):
    with pytest.raises(ValueError):
        agent.run_tool("grammar", "")
    assistant.fix_grammar.assert_not_called()


def test_run_tool_propagates_assistant_errors(agent, assistant):
    assistant.social_post.side_effect = AssistantError("offline")
    with pytest.raises(AssistantError):
        agent.run_tool("social_post", "අම්ම")


def test_restore_and_delete(agent):
    item = agent.store.add("තාත්තා")

    assert agent.restore(item.id) == "තාත්තා"
    assert agent.delete(item.id) is True
    with pytest.raises(KeyError):
        agent.restore(item.id)
