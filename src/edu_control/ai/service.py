from __future__ import annotations

import json
from typing import List, Optional

from ..common.validators import require_non_empty
from ..core.enums import MANAGEMENT_ROLES, Role
from ..core.exceptions import AuthorizationError
from ..ratings.service import RatingService
from ..users.model import User
from .client import TextGenerator
from .repository import ChatHistoryRepository
from .task import AiTask, AiTaskRunner

CHAT_INSTRUCTION = (
    "You are a professional educational assistant and mentor at the EduControl digital college. "
    "Help students and teachers with education, science, career and self-development. "
    "Answer clearly and encouragingly in the user's language (Russian, Kyrgyz or English). "
    "If a question is not about education or the college, politely steer back to academic topics."
)

CHAT_FALLBACK = "Sorry, I can't answer right now. Please try again later."
STUDENT_REPORT_FALLBACK = "Analysis failed."
COLLEGE_REPORT_FALLBACK = "The report could not be generated. Please try again."


def student_report_prompt(student_name: str, performance: dict) -> str:
    return (
        "Analyse the student's performance and give three pieces of advice.\n"
        f"Student: {student_name}\n"
        f"Data: {json.dumps(performance, ensure_ascii=False)}"
    )


def college_report_prompt(aggregate: dict) -> str:
    return (
        "Analyse the overall performance, attendance and state of the college using this data. "
        "Write a professional, structured analytical report for the administration.\n"
        "Highlight:\n"
        "1. General trends (performance vs attendance).\n"
        "2. Leading groups and groups that need attention.\n"
        "3. Concrete recommendations to improve the educational process.\n"
        f"Data: {json.dumps(aggregate, ensure_ascii=False)}"
    )


class AiAssistantService:
    """Use case: AI chat and performance reports.

    Replies are opaque prose. Failures end as FAILED tasks carrying a fixed
    fallback text and never propagate further.
    """

    def __init__(
        self,
        generator: TextGenerator,
        history: ChatHistoryRepository,
        ratings: RatingService,
        *,
        runner: Optional[AiTaskRunner] = None,
        chat_model: Optional[str] = None,
        report_model: Optional[str] = None,
    ):
        self._generator = generator
        self._history = history
        self._ratings = ratings
        self._runner = runner or AiTaskRunner()
        self._chat_model = chat_model
        self._report_model = report_model

    @property
    def runner(self) -> AiTaskRunner:
        return self._runner

    def chat_history(self, user_id: str) -> List[dict]:
        return self._history.get(user_id)

    def chat(self, user: User, message: str) -> AiTask:
        message = require_non_empty(message, "Message")
        # the key stays reserved until both turns are stored
        task = self._runner.start((user.id, "chat"))
        try:
            turns = [*self._history.get(user.id), {"role": "user", "text": message}]
            self._history.put(user.id, turns)
            self._runner.execute(
                task,
                lambda: self._generator.generate(turns, system_instruction=CHAT_INSTRUCTION, model=self._chat_model),
                fallback=CHAT_FALLBACK,
            )
            self._history.put(user.id, [*turns, {"role": "model", "text": task.result}])
        finally:
            self._runner.finish(task)
        return task

    def student_report(self, user: User) -> AiTask:
        if user.role != Role.STUDENT:
            raise AuthorizationError("Reports are available to students only")

        profile = self._ratings.profile_for(user.id)
        performance = {
            "grades": [g.value for g in profile.grades],
            "attendance": len(profile.attendance),
            "rating": profile.rating,
        }
        prompt = student_report_prompt(user.full_name, performance)
        return self._runner.run(
            (user.id, "student_report"),
            lambda: self._generator.generate([{"role": "user", "text": prompt}], model=self._chat_model),
            fallback=STUDENT_REPORT_FALLBACK,
        )

    def collective_report(self, user: User) -> AiTask:
        if user.role not in MANAGEMENT_ROLES:
            raise AuthorizationError("Only administration can request the college report")

        prompt = college_report_prompt(self._ratings.college_summary())
        return self._runner.run(
            ("college", "collective_report"),
            lambda: self._generator.generate([{"role": "user", "text": prompt}], model=self._report_model),
            fallback=COLLEGE_REPORT_FALLBACK,
        )
