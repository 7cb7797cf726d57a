from app.generation.prompts import build_summary_prompt, build_tag_prompt

TITLE = "Weekly sync {notes}"
CONTENT = "- ship the **tag** parser\n- review [draft] by Friday"


def test_summary_prompt_is_deterministic_and_embeds_inputs():
    p1 = build_summary_prompt(TITLE, CONTENT)
    p2 = build_summary_prompt(TITLE, CONTENT)
    assert p1 == p2
    assert TITLE in p1 and CONTENT in p1
    assert "3 concise sentences" in p1


def test_tag_prompt_is_deterministic_and_embeds_inputs():
    p1 = build_tag_prompt(TITLE, CONTENT)
    assert p1 == build_tag_prompt(TITLE, CONTENT)
    assert TITLE in p1 and CONTENT in p1
    assert "JSON array only" in p1
    assert "3 to 5" in p1


def test_prompts_use_target_language():
    assert "in Korean" in build_summary_prompt("t", "c", language="Korean")
    assert "in English" in build_tag_prompt("t", "c", language="English")


def test_prompts_differ():
    assert build_summary_prompt("t", "c") != build_tag_prompt("t", "c")
