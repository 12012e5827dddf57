"""
CLI phase 1: gather user requirements.

Parses command-line arguments and returns a UserConfig.
No side effects beyond reading a job-description file.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import AssistAction, AssistStage, ExportFormat, RenderStage, UserConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvstudio",
        description="Render a CV document to HTML and Word, optionally using the writing assistant.",
        epilog="""
Examples:
  Export the seed CV in every format:
    cvstudio --target out/

  Export a saved CV with the classic layout as Word only:
    cvstudio --data cv.json --template classic --format docx --target out/

  Tailor a CV to a job description and keep the result:
    cvstudio --data cv.json --assist tailor --job-description-file job.txt \\
      --save cv.json --target out/

  Score a CV against a job description (no export):
    cvstudio --data cv.json --assist match --job-description "..." --format none
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data", type=Path, help="CV JSON file (defaults to the built-in sample CV)")
    parser.add_argument("--target", type=Path, help="Output directory for exported files")
    parser.add_argument("--save", type=Path, help="Write the resulting CV JSON to this path")
    parser.add_argument("--template", help="Layout to use (overrides templateId in the data)")
    parser.add_argument("--theme-color", help="Accent color, e.g. '#0f766e'")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat] + ["none"],
        default=ExportFormat.BOTH.value,
        help="Export format (default: both)",
    )
    parser.add_argument(
        "--assist",
        choices=[a.value for a in AssistAction],
        help="Run one writing-assistant action before exporting",
    )
    parser.add_argument("--job-description", help="Job description text for match/tailor")
    parser.add_argument("--job-description-file", type=Path, help="File holding the job description")
    parser.add_argument("--experience-id", help="Experience entry to rewrite with --assist enhance")
    parser.add_argument("--openai-model", help="OpenAI model for the assistant (default: $OPENAI_MODEL or gpt-4o-mini)")
    parser.add_argument("--list-templates", action="store_true", help="List available layouts and exit")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase output (-v, -vv)")
    parser.add_argument("--debug", action="store_true", help="Debug logging and tracebacks")
    parser.add_argument("--log-file", help="Also write a detailed log to this file")
    return parser


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: parse command-line arguments into a UserConfig.

    Raises:
        SystemExit: On invalid argument combinations (via argparse)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = UserConfig(
        data=args.data,
        target_dir=args.target,
        save=args.save,
        list_templates=args.list_templates,
        debug=args.debug,
        verbosity=args.verbose,
        log_file=args.log_file,
    )
    if args.list_templates:
        return config

    if args.format != "none":
        if args.target is None:
            parser.error("--target is required when exporting (use --format none to skip)")
        config.render = RenderStage(
            formats=ExportFormat(args.format).formats,
            template=args.template,
            theme_color=args.theme_color,
        )
    elif args.template or args.theme_color:
        config.render = RenderStage(formats=[], template=args.template, theme_color=args.theme_color)

    if args.assist:
        action = AssistAction(args.assist)
        job_description = args.job_description
        if args.job_description_file is not None:
            try:
                job_description = args.job_description_file.read_text(encoding="utf-8")
            except OSError as e:
                parser.error(f"cannot read {args.job_description_file}: {e}")
        if action.needs_job_description and not job_description:
            parser.error(f"--assist {action.value} requires --job-description or --job-description-file")
        if action is AssistAction.ENHANCE and not args.experience_id:
            parser.error("--assist enhance requires --experience-id")
        config.assist = AssistStage(
            action=action,
            job_description=job_description,
            experience_id=args.experience_id,
            openai_model=args.openai_model,
        )

    return config
