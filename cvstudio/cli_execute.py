"""
CLI phase 2: execute the requested stages.

Order: load document, apply overrides, run the assistant action, render,
export, save.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .assistant import AssistantActions, OpenAITextService, WritingAssistant
from .cli_config import AssistAction, AssistStage, UserConfig
from .edits import set_template, set_theme_color
from .layouts import list_layouts
from .logging_utils import LOG
from .session import DocumentSession


def _print_templates() -> int:
    for layout in list_layouts():
        print(f"{layout['name']:<10} {layout['description']}")
    return 0


def _run_assist(session: DocumentSession, stage: AssistStage) -> None:
    service = OpenAITextService(model=stage.openai_model)
    actions = AssistantActions(session, WritingAssistant(service))

    if stage.action is AssistAction.SUMMARY:
        actions.generate_summary()
    elif stage.action is AssistAction.SKILLS:
        actions.suggest_skills()
    elif stage.action is AssistAction.ENHANCE:
        actions.enhance_description(stage.experience_id or "")
    elif stage.action is AssistAction.TAILOR:
        actions.tailor(stage.job_description or "")
    elif stage.action is AssistAction.MATCH:
        result = actions.analyze_match(stage.job_description or "")
        print(f"Match score: {result.score:g}/100")
        if result.missing_keywords:
            print("Missing keywords: " + ", ".join(result.missing_keywords))
        for tip in result.improvements:
            print(f"- {tip}")


def execute(config: UserConfig) -> int:
    """Run the configured stages. Returns the process exit code."""
    if config.list_templates:
        return _print_templates()

    session = DocumentSession.from_file(config.data)
    LOG.info("Loaded CV for '%s'", session.document.personal_info.full_name)

    render = config.render
    if render is not None:
        if render.template:
            session.apply(set_template, render.template)
        if render.theme_color:
            session.apply(set_theme_color, render.theme_color)

    if config.assist is not None:
        _run_assist(session, config.assist)

    written: List[Path] = []
    if render is not None and render.formats:
        target_dir = config.target_dir or Path(".")
        if "html" in render.formats:
            session.render()
            written.append(session.export_html(target_dir))
        if "docx" in render.formats:
            written.append(session.export_docx(target_dir))

    if config.save is not None:
        written.append(session.save(config.save))

    for path in written:
        print(f"Wrote {path}")
    return 0
