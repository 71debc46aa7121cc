# boilr/session.py
"""
Interactive schema revision loop.

CollectProjectName -> CollectIdea -> Generating -> Reviewing
    -> (Revising -> Reviewing)* -> Approved

Input problems are handled here by re-prompting. Model-call failures are
fatal and propagate to the caller unchanged.
"""

import logging
import re
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from enum import Enum

from boilr.llm.designer import SchemaDesigner
from boilr.schema import AbstractSchema

logger = logging.getLogger(__name__)

APPROVAL_PHRASES = frozenset({"looks good", "yes", "y", "approve", "ok"})

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class SessionState(Enum):
    """Revision loop states."""

    COLLECT_PROJECT_NAME = "collect_project_name"
    COLLECT_IDEA = "collect_idea"
    GENERATING = "generating"
    REVIEWING = "reviewing"
    REVISING = "revising"
    APPROVED = "approved"


@dataclass
class ApprovedDesign:
    """Result handed to scaffolding once the user approves."""

    project_name: str
    schema: AbstractSchema
    revisions: int = 0


def is_approval(feedback: str) -> bool:
    """True if feedback (trimmed, any case) is one of APPROVAL_PHRASES."""
    return feedback.strip().casefold() in APPROVAL_PHRASES


def is_valid_project_name(name: str) -> bool:
    """Letters, digits, hyphen and underscore only; must be non-empty."""
    return PROJECT_NAME_PATTERN.fullmatch(name) is not None


def render_schema(schema: AbstractSchema) -> str:
    """
    Render a schema for review.

    Example:
        users
          - id: serial (primary_key, not_null)
          - email: varchar (not_null, unique)
    """
    lines = []
    for model in schema.models:
        lines.append(model.name)
        for f in model.fields:
            line = f"  - {f.name}: {f.type.value}"
            constraints = f.constraints()
            if constraints:
                line += f" ({', '.join(constraints)})"
            lines.append(line)
        lines.append("")
    return "\n".join(lines).rstrip("\n")


@dataclass
class RevisionSession:
    """
    Drives one schema design conversation.

    Args:
        designer: Runs generate/revise calls
        ask: Reads one line of user input for a prompt
        show: Prints text to the user
        busy: Returns a context manager wrapping each model call (spinner)
    """

    designer: SchemaDesigner
    ask: Callable[[str], str]
    show: Callable[[str], None]
    busy: Callable[[str], AbstractContextManager] | None = None
    state: SessionState = SessionState.COLLECT_PROJECT_NAME
    history: list[str] = field(default_factory=list)

    def _busy(self, message: str) -> AbstractContextManager:
        if self.busy is None:
            return nullcontext()
        return self.busy(message)

    def _collect_project_name(self) -> str:
        while True:
            name = self.ask("What is the name of your project?").strip()
            if not name:
                self.show("Project name cannot be empty.")
            elif not is_valid_project_name(name):
                self.show(
                    "Project name may only contain letters, numbers, hyphens and underscores."
                )
            else:
                return name

    def _collect_idea(self) -> str:
        while True:
            idea = self.ask("Describe your app idea").strip()
            if idea:
                return idea
            self.show("Please describe your app idea.")

    def _collect_feedback(self) -> str:
        while True:
            feedback = self.ask(
                "Does this look right? Type 'looks good' to approve, or describe changes"
            ).strip()
            if feedback:
                return feedback

    async def run(self) -> ApprovedDesign:
        """Run the loop until the user approves the schema."""
        self.state = SessionState.COLLECT_PROJECT_NAME
        project_name = self._collect_project_name()

        self.state = SessionState.COLLECT_IDEA
        idea = self._collect_idea()

        self.state = SessionState.GENERATING
        logger.info(f"Generating schema for project '{project_name}'")
        with self._busy("Designing your database schema..."):
            schema = await self.designer.generate_schema(idea)

        while True:
            self.state = SessionState.REVIEWING
            self.show("\nProposed schema:\n")
            self.show(render_schema(schema))
            self.show("")
            feedback = self._collect_feedback()

            if is_approval(feedback):
                break

            self.state = SessionState.REVISING
            logger.info(f"Revision {len(self.history) + 1}: {feedback!r}")
            with self._busy("Revising your schema..."):
                schema = await self.designer.revise_schema(schema, feedback)
            self.history.append(feedback)

        self.state = SessionState.APPROVED
        logger.info(f"Schema approved after {len(self.history)} revision(s)")
        return ApprovedDesign(
            project_name=project_name, schema=schema, revisions=len(self.history)
        )
