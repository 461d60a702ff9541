from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .academics.kv_academics_repository import KVDisciplineRepository, KVGradeRepository
from .academics.service import AcademicsService
from .ai.client import GeminiClient, TextGenerator
from .ai.kv_chat_history_repository import KVChatHistoryRepository
from .ai.service import AiAssistantService
from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.resolver import AttendanceSessionResolver
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .groups.kv_group_repository import KVGroupRepository
from .groups.service import GroupService
from .library.kv_library_repository import KVLibraryRepository
from .library.service import LibraryService
from .messages.kv_message_repository import KVMessageRepository
from .messages.service import MessageService
from .news.kv_news_repository import KVNewsRepository
from .news.service import NewsService
from .ratings.service import RatingService
from .schedules.kv_schedule_repository import KVScheduleRepository
from .schedules.service import ScheduleService
from .scores.kv_score_repository import KVScoreRepository
from .storage.file_store import JsonFileStore
from .storage.gateway import KeyValueStore, PersistenceGateway
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .users.kv_user_repository import KVUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    gateway: PersistenceGateway

    users_repo: KVUserRepository
    groups_repo: KVGroupRepository
    schedules_repo: KVScheduleRepository
    attendance_repo: KVAttendanceRepository
    scores_repo: KVScoreRepository

    auth_service: AuthService
    user_service: UserService
    group_service: GroupService
    schedule_service: ScheduleService
    attendance_resolver: AttendanceSessionResolver
    attendance_service: AttendanceService
    rating_service: RatingService
    academics_service: AcademicsService
    library_service: LibraryService
    news_service: NewsService
    message_service: MessageService
    ai_service: AiAssistantService


def build_store(settings: Any) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG)))
    if backend == "file":
        return JsonFileStore(getattr(settings, "DATA_DIR", "data"))
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(
    settings: Any,
    *,
    store: Optional[KeyValueStore] = None,
    generator: Optional[TextGenerator] = None,
) -> Container:
    gateway = PersistenceGateway(store or build_store(settings))

    users_repo = KVUserRepository(gateway)
    groups_repo = KVGroupRepository(gateway)
    schedules_repo = KVScheduleRepository(gateway)
    attendance_repo = KVAttendanceRepository(gateway)
    scores_repo = KVScoreRepository(gateway)
    grades_repo = KVGradeRepository(gateway)
    discipline_repo = KVDisciplineRepository(gateway)

    resolver = AttendanceSessionResolver(schedules_repo, users_repo, attendance_repo)
    rating_service = RatingService(
        users_repo,
        attendance_repo,
        scores_repo,
        groups_repo,
        grades_repo,
        discipline_repo,
    )

    generator = generator or GeminiClient(
        getattr(settings, "GEMINI_API_KEY", ""),
        default_model=getattr(settings, "GEMINI_CHAT_MODEL", "gemini-3-flash-preview"),
        timeout=float(getattr(settings, "AI_TIMEOUT_SECONDS", 60)),
    )

    return Container(
        gateway=gateway,
        users_repo=users_repo,
        groups_repo=groups_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        scores_repo=scores_repo,
        auth_service=AuthService(
            users_repo,
            groups_repo,
            admin_registration_key=getattr(settings, "ADMIN_REGISTRATION_KEY", "ADMIN123"),
        ),
        user_service=UserService(users_repo),
        group_service=GroupService(groups_repo),
        schedule_service=ScheduleService(schedules_repo),
        attendance_resolver=resolver,
        attendance_service=AttendanceService(attendance_repo, resolver),
        rating_service=rating_service,
        academics_service=AcademicsService(grades_repo, discipline_repo, users_repo),
        library_service=LibraryService(KVLibraryRepository(gateway)),
        news_service=NewsService(KVNewsRepository(gateway)),
        message_service=MessageService(KVMessageRepository(gateway), users_repo),
        ai_service=AiAssistantService(
            generator,
            KVChatHistoryRepository(gateway),
            rating_service,
            chat_model=getattr(settings, "GEMINI_CHAT_MODEL", None),
            report_model=getattr(settings, "GEMINI_REPORT_MODEL", None),
        ),
    )
