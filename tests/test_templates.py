from sysprompt import get_compression_prompt


def test_compression_prompt_is_constant():
    assert get_compression_prompt() == get_compression_prompt()


def test_compression_prompt_sections():
    prompt = get_compression_prompt()
    for section in (
        "overall_goal",
        "key_knowledge",
        "file_system_state",
        "recent_actions",
        "current_plan",
    ):
        assert f"<{section}>" in prompt
        assert f"</{section}>" in prompt
    assert prompt.startswith("You are")
    assert prompt.endswith("</state_snapshot>")
