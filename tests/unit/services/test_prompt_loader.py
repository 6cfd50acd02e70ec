"""Test the TOML prompt loader."""

import pytest

from reqbot.services.prompt_loader import PromptLoader


class TestPromptLoader:
    """Test cases for PromptLoader."""

    def setup_method(self) -> None:
        self.loader = PromptLoader()

    def test_interview_prompt_interpolates_project_name(self) -> None:
        prompt = self.loader.get("interview", "system", project_name="Clinic Scheduler")

        assert 'project called "Clinic Scheduler"' in prompt
        assert "Ask exactly ONE question per reply." in prompt

    def test_extraction_instruction_keeps_literal_dollars_and_braces(self) -> None:
        instruction = self.loader.get("extraction", "instruction", conversation="User: hi")

        assert '"$50,000 - $80,000"' in instruction
        assert '"Functional Requirements": [' in instruction
        assert instruction.endswith("Conversation:\nUser: hi")

    def test_load_is_cached(self) -> None:
        assert self.loader.load("interview") is self.loader.load("interview")

    def test_missing_placeholder_value_raises(self) -> None:
        with pytest.raises(KeyError):
            self.loader.get("interview", "system")

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(KeyError, match="no 'missing' entry"):
            self.loader.get("interview", "missing")

    def test_unknown_prompt_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            PromptLoader(tmp_path).load("interview")

    def test_custom_directory(self, tmp_path) -> None:
        (tmp_path / "greeting_prompt.toml").write_text('text = "Hello $who"\n', encoding="utf-8")

        assert PromptLoader(tmp_path).get("greeting", "text", who="team") == "Hello team"
