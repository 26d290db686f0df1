"""Main entry point for the Gantt scheduling and rendering core."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date, timedelta
from pathlib import Path

from gantt_core.engine.critical_path import analyze
from gantt_core.engine.layout import GanttLayoutEngine
from gantt_core.engine.timeline import get_default_day_width, timeline_items, view_bounds
from gantt_core.engine.utilization import UtilizationAggregator
from gantt_core.synthetic.generator import ProjectGenerator
from gantt_core.utils.config import resolve_config
from gantt_core.utils.datetime_utils import to_date
from gantt_core.utils.loader import load_project
from gantt_core.utils.tasks import flatten_visible

logger = logging.getLogger(__name__)


def load_data(project_path: str, config: dict):
    """Load a project file, or generate a synthetic project without one."""
    if project_path:
        return load_project(project_path)

    logger.info("No project file given, generating a synthetic project")
    generator = ProjectGenerator(seed=42, config=config)
    return generator.generate_project(date.today())


def write_output(data, output_path: str):
    """Save JSON output."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(data, f, indent=2, default=str)
    print(f"Output saved to: {path}")


def run_layout(args, config: dict):
    """Lay out the visible task rows and dependency arrows."""
    tasks, _ = load_data(args.project, config)
    if not tasks:
        print("Project has no tasks")
        return None

    visible = flatten_visible(tasks)
    view_start = to_date(args.start) if args.start else min(task.start_date for task in tasks)
    day_width = get_default_day_width(args.scale) if args.scale else None

    engine = GanttLayoutEngine(config)
    layout = engine.layout(tasks, visible, view_start, args.scroll, args.viewport, day_width=day_width)

    print(layout.to_human_readable())
    if args.output:
        write_output(layout.to_dict(), args.output)
    return layout


def run_utilization(args, config: dict):
    """Report daily utilization per resource."""
    tasks, resources = load_data(args.project, config)

    start = to_date(args.start) if args.start else (
        min(task.start_date for task in tasks) if tasks else date.today()
    )
    end = to_date(args.end) if args.end else start + timedelta(days=13)

    aggregator = UtilizationAggregator(config)
    reports = aggregator.aggregate_resources(resources, start, end)

    for report in reports:
        print(report.to_human_readable())
    if args.output:
        write_output([report.to_dict() for report in reports], args.output)
    return reports


def run_critical_path(args, config: dict):
    """Report slack and the critical path."""
    tasks, _ = load_data(args.project, config)
    work = [task for task in tasks if not task.is_phase]
    nodes = analyze(work)

    print(f"\n{'Task':<20} {'Earliest':<12} {'Latest':<12} {'Slack':>6}")
    print("-" * 54)
    for task in work:
        node = nodes[task.task_id]
        marker = " *" if node.is_critical else ""
        print(f"{task.task_id:<20} {node.earliest_start!s:<12} {node.latest_start!s:<12} {node.slack:>6}{marker}")

    critical = [task_id for task_id, node in nodes.items() if node.is_critical]
    print(f"\nCritical path: {' -> '.join(critical) if critical else '(none)'}")

    if args.output:
        write_output({
            task_id: {
                'earliest_start': node.earliest_start,
                'earliest_finish': node.earliest_finish,
                'latest_start': node.latest_start,
                'latest_finish': node.latest_finish,
                'slack': node.slack,
                'is_critical': node.is_critical,
            }
            for task_id, node in nodes.items()
        }, args.output)
    return nodes


def run_timeline(args, config: dict):
    """Print the timeline header cells for a scale."""
    timeline_config = config.get('timeline', {})
    scale = args.scale or timeline_config.get('time_scale', 'day')

    if args.start and args.end:
        start, end = to_date(args.start), to_date(args.end)
    else:
        tasks, _ = load_data(args.project, config)
        start, end = view_bounds(
            [d for task in tasks for d in (task.start_date, task.end_date)] or [date.today()],
            minimum_months=timeline_config.get('minimum_view_months'),
        )

    items = timeline_items(scale, start, end, get_default_day_width(scale))
    for item in items:
        indent = "  " if item.type == 'secondary' else ""
        print(f"{indent}{item.date} {item.label:<16} {item.width:g}px")

    if args.output:
        write_output([asdict(item) for item in items], args.output)
    return items


def run_generate(args, config: dict):
    """Generate a synthetic project document."""
    generator = ProjectGenerator(seed=args.seed, config=config)
    start = to_date(args.start) if args.start else date.today()
    tasks, resources = generator.generate_project(start)

    print(f"Generated {len(tasks)} tasks")
    print(f"Generated {len(resources)} resources")

    document = {
        'project': {'id': 'project_synthetic', 'name': 'Synthetic Project'},
        'tasks': [
            {
                'id': t.task_id,
                'name': t.name,
                'startDate': t.start_date.isoformat(),
                'endDate': t.end_date.isoformat(),
                'progress': t.progress,
                'status': t.status,
                'priority': t.priority,
                'parentId': t.parent_id,
                'isPhase': t.is_phase,
                'dependencies': [
                    {'fromTaskId': d.from_task_id, 'toTaskId': d.to_task_id, 'type': d.type, 'lag': d.lag}
                    for d in t.dependencies
                ],
            }
            for t in tasks
        ],
        'resources': [
            {
                'id': r.resource_id,
                'name': r.name,
                'type': r.type,
                'baseHoursPerDay': r.base_hours_per_day,
                'assignments': [
                    {
                        'id': a.assignment_id,
                        'taskId': a.task_id,
                        'startDate': a.start_date.isoformat() if a.start_date else None,
                        'endDate': a.end_date.isoformat() if a.end_date else None,
                        'units': a.units,
                        'hoursPerDay': a.hours_per_day,
                    }
                    for a in r.assignments
                ],
            }
            for r in resources
        ],
    }

    write_output(document, args.output or "results/generated_project.json")
    return document


COMMANDS = {
    'layout': run_layout,
    'utilization': run_utilization,
    'critical-path': run_critical_path,
    'timeline': run_timeline,
    'generate': run_generate,
}


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Gantt scheduling and rendering core"
    )
    parser.add_argument(
        'command',
        choices=sorted(COMMANDS),
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--project',
        type=str,
        default=None,
        help='Project document (JSON or YAML); a synthetic project is used when omitted'
    )
    parser.add_argument('--start', type=str, help='View or window start date (YYYY-MM-DD)')
    parser.add_argument('--end', type=str, help='Window end date (YYYY-MM-DD)')
    parser.add_argument('--scroll', type=float, default=0, help='Vertical scroll offset in pixels')
    parser.add_argument('--viewport', type=float, default=600, help='Viewport height in pixels')
    parser.add_argument(
        '--scale',
        type=str,
        choices=['day', 'week', 'month', 'quarter', 'year'],
        default=None,
        help='Time scale'
    )
    parser.add_argument('--seed', type=int, default=42, help='Seed for the generate command')
    parser.add_argument('--output', type=str, default=None, help='Write JSON output to this path')
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    try:
        config = resolve_config(args.config)
        COMMANDS[args.command](args, config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
