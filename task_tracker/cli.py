#!/usr/bin/env python3
"""
Command-line interface for task-tracker.
"""
import json
import logging
import sys
from typing import Any

import click

from task_tracker.config import resolve_tasks_path
from task_tracker.exceptions import ServiceError, to_exit_code
from task_tracker.models import Task, TaskStatus
from task_tracker.services import TaskRegistry
from task_tracker.storage import TaskStore

logger = logging.getLogger(__name__)


def format_task(task: Task) -> str:
    """Format task for display."""
    data = task.model_dump(mode="json")
    lines = [
        f"Task #{data['id']}: {data['description']}",
        f"  Status: {data['status']}",
        f"  Created: {data['created_at']}",
        f"  Updated: {data['updated_at'] or '-'}",
    ]
    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as JSON."""
    return json.dumps(data, indent=2, default=str)


def get_registry(ctx: click.Context) -> TaskRegistry:
    """Load the registry for the task file selected on the command line."""
    store = TaskStore(ctx.obj['file'])
    return TaskRegistry.from_store(store)


def fail(exc: ServiceError) -> None:
    """Report a service error and exit with its exit code."""
    logger.debug(f"Command failed: {exc.to_dict()}")
    click.echo(f"Error: {exc.message}", err=True)
    sys.exit(to_exit_code(exc))


@click.group()
@click.option('--file', 'file_path', envvar='TASK_TRACKER_FILE', default=None,
              type=click.Path(dir_okay=False),
              help='Task file (default: tasks.json in the current directory)')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, file_path, verbose):
    """Track tasks in a local JSON file."""
    if verbose:
        logging.getLogger('task_tracker').setLevel(logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj['file'] = resolve_tasks_path(file_path)
    logger.debug(f"Using task file {ctx.obj['file']}")


@cli.command()
@click.argument('description')
@click.pass_context
def add(ctx, description):
    """Add a new task."""
    try:
        task_id = get_registry(ctx).add(description)
        click.echo(f"Task added successfully (ID: {task_id})")
    except ServiceError as e:
        fail(e)


@cli.command()
@click.argument('task_id', type=int)
@click.argument('description')
@click.pass_context
def update(ctx, task_id, description):
    """Update a task's description."""
    try:
        get_registry(ctx).update(task_id, description)
        click.echo(f"Task {task_id} updated successfully")
    except ServiceError as e:
        fail(e)


@cli.command()
@click.argument('task_id', type=int)
@click.pass_context
def delete(ctx, task_id):
    """Delete a task."""
    try:
        get_registry(ctx).delete(task_id)
        click.echo(f"Task {task_id} deleted successfully")
    except ServiceError as e:
        fail(e)


def _mark(ctx: click.Context, task_id: int, status: TaskStatus) -> None:
    try:
        get_registry(ctx).set_status(task_id, status)
        click.echo(f"Task {task_id} marked as {status.value}")
    except ServiceError as e:
        fail(e)


@cli.command('mark-todo')
@click.argument('task_id', type=int)
@click.pass_context
def mark_todo(ctx, task_id):
    """Mark a task as todo."""
    _mark(ctx, task_id, TaskStatus.TODO)


@cli.command('mark-in-progress')
@click.argument('task_id', type=int)
@click.pass_context
def mark_in_progress(ctx, task_id):
    """Mark a task as in progress."""
    _mark(ctx, task_id, TaskStatus.IN_PROGRESS)


@cli.command('mark-done')
@click.argument('task_id', type=int)
@click.pass_context
def mark_done(ctx, task_id):
    """Mark a task as done."""
    _mark(ctx, task_id, TaskStatus.DONE)


@cli.command('list')
@click.argument('status', required=False, type=click.Choice(TaskStatus.choices()))
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def list_tasks(ctx, status, output_format):
    """List tasks, optionally only those with STATUS."""
    try:
        tasks = get_registry(ctx).list(status)
    except ServiceError as e:
        fail(e)

    if output_format == 'json':
        click.echo(format_json([task.model_dump(mode="json") for task in tasks]))
        return

    if not tasks:
        if status:
            click.echo(f"No tasks with the status {status}.")
        else:
            click.echo("No tasks found.")
        return

    for task in tasks:
        click.echo(format_task(task))
        click.echo()


@cli.command()
@click.argument('task_id', type=int)
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def show(ctx, task_id, output_format):
    """Show task details."""
    try:
        task = get_registry(ctx).get(task_id)
    except ServiceError as e:
        fail(e)

    if output_format == 'json':
        click.echo(format_json(task.model_dump(mode="json")))
    else:
        click.echo(format_task(task))
