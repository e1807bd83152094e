"""Main entry point for Cuaderno"""

import asyncio
import argparse
import json
import sys
from pathlib import Path

from core.enums import ChartType
from core.exceptions import CuadernoError
from core.models import ChartConfig
from db import DatabaseManager, PostgresDocumentStore
from orchestrator import Orchestrator
from ui.progress import ConsoleProgress
from ui.prompts import ConsolePrompt
from utils.log import setup_logging
from config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cuaderno - Form data collection and charting"
    )
    parser.add_argument(
        "--db",
        type=str,
        default=settings.DATABASE_URL,
        help="PostgreSQL connection string"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("forms", help="List forms")

    template = commands.add_parser("template", help="Write the import template of a form")
    template.add_argument("form_id", nargs="?", help="Form id (prompted when omitted)")
    template.add_argument("--output-dir", type=Path, default=None, help="Output directory")

    upload = commands.add_parser("import", help="Import a spreadsheet into a form")
    upload.add_argument("form_id", help="Form id")
    upload.add_argument("file", type=Path, help="Spreadsheet (.xlsx, .xls, .csv)")
    upload.add_argument("--user", type=str, default=None, help="Submitting user id")

    chart = commands.add_parser("chart", help="Print chart points as JSON")
    chart.add_argument("form_id", help="Form id")
    chart.add_argument("--type", choices=[t.value for t in ChartType], default=ChartType.COLUMN.value)
    chart.add_argument("--x", dest="x_axis", default="", help="X-axis field")
    chart.add_argument("--y", dest="y_axis", default="", help="Y-axis field")
    chart.add_argument("--target", type=float, default=None, help="Target line value")

    delete = commands.add_parser("delete", help="Delete a submission")
    delete.add_argument("submission_id", help="Submission id")

    return parser


async def run(args: argparse.Namespace) -> int:
    db = DatabaseManager(args.db)
    await db.create_pool()
    store = PostgresDocumentStore(db)
    prompt = ConsolePrompt()

    try:
        await store.init_schema()
        orchestrator = Orchestrator(store, progress=ConsoleProgress())

        if args.command == "forms":
            for form in await orchestrator.list_forms():
                print(f"{form.id}  {form.name}  ({', '.join(form.field_names)})")

        elif args.command == "template":
            form_id = args.form_id
            if not form_id:
                form = await prompt.select_form(await orchestrator.list_forms())
                if form is None:
                    return 1
                form_id = form.id
            path = await orchestrator.export_template(form_id, args.output_dir)
            print(f"✓ Template written to {path}")

        elif args.command == "import":
            if not args.file.exists():
                print(f"Error: File not found: {args.file}")
                return 1
            report = await orchestrator.run_import(args.form_id, str(args.file), args.user)
            return 0 if report.success_count > 0 else 1

        elif args.command == "chart":
            config = ChartConfig(
                type=ChartType(args.type),
                x_axis=args.x_axis,
                y_axis=args.y_axis,
                target=args.target
            )
            effective, points = await orchestrator.chart(args.form_id, config)
            print(json.dumps(
                {"config": effective.model_dump(mode="json", by_alias=True), "points": points},
                indent=2,
                default=str
            ))

        elif args.command == "delete":
            if not await prompt.yes_no("Are you sure you want to delete this entry?"):
                return 0
            await orchestrator.delete_entry(args.submission_id)
            print("✓ Entry deleted")

        return 0
    finally:
        await db.close()


def main():
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    try:
        return asyncio.run(run(args))
    except CuadernoError as e:
        print(f"\n✗ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
