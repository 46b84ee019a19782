"""Interactive prompts.

A prompt flow is an ordered list of :class:`PromptStep`. The sequencer asks
them one by one and threads the answers collected so far into each step, so a
later step can offer choices that depend on an earlier answer.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import click

from .models.constants import DEFAULT_ISSUE_NAME
from .models.jira import JiraCreateMeta, JiraIssueDraft

logger = logging.getLogger("jira-issue-cli.prompts")

Answers = dict[str, Any]


@dataclass
class PromptStep:
    """One question.

    ``choices`` turns the step into a single-choice list; it receives the
    answers collected so far; ``empty`` is the error shown when it offers
    nothing. ``resolve`` maps the raw answer to the value stored under
    ``name``.
    """

    name: str
    message: str
    choices: Callable[[Answers], list[str]] | None = None
    default: str | None = None
    resolve: Callable[[str, Answers], Any] | None = None
    empty: str | None = None


class PromptSequencer:
    """Asks prompt steps in order.

    ``prompt`` has the signature of :func:`click.prompt`; an interrupt or EOF
    raises :class:`click.Abort`, which is left to propagate so that nothing
    gets submitted.
    """

    def __init__(self, prompt: Callable[..., Any] = click.prompt) -> None:
        self._prompt = prompt

    def ask(self, step: PromptStep, answers: Answers) -> Any:
        if step.choices is not None:
            choices = step.choices(answers)
            if not choices:
                raise click.ClickException(
                    step.empty or f"Nothing to choose from for '{step.name}'"
                )
            value = self._prompt(
                step.message,
                type=click.Choice(choices),
                default=step.default,
                show_choices=True,
            )
        else:
            value = self._prompt(step.message, default=step.default)

        if step.resolve is not None:
            return step.resolve(value, answers)
        return value

    def run(self, steps: list[PromptStep], answers: Answers | None = None) -> Answers:
        answers = dict(answers or {})
        for step in steps:
            answers[step.name] = self.ask(step, answers)
            logger.debug(f"Prompt '{step.name}' answered")
        return answers


def project_steps(meta: JiraCreateMeta) -> list[PromptStep]:
    """First round: pick the project by its display name."""
    return [
        PromptStep(
            name="project",
            message="Project",
            choices=lambda answers: meta.project_names,
            resolve=lambda value, answers: meta.project_by_name(value),
            empty="No projects available to create issues in",
        ),
    ]


def issue_steps() -> list[PromptStep]:
    """Second round: issue type of the chosen project, then the issue name."""
    return [
        PromptStep(
            name="issue_type",
            message="Issue type",
            choices=lambda answers: answers["project"].issue_type_names,
            empty="No issue types available in the chosen project",
        ),
        PromptStep(
            name="issue_name",
            message="Please provide the issue name",
            default=DEFAULT_ISSUE_NAME,
        ),
    ]


def prompt_issue_draft(
    meta: JiraCreateMeta,
    sequencer: PromptSequencer,
    assignee: str | None = None,
) -> JiraIssueDraft:
    """Run both creation rounds and merge the answers into a draft."""
    answers = sequencer.run(project_steps(meta) + issue_steps())
    return JiraIssueDraft(
        project_key=answers["project"].key,
        summary=answers["issue_name"],
        issue_type=answers["issue_type"],
        assignee=assignee,
    )
