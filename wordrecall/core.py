from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from wordrecall.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from wordrecall.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from wordrecall.application.study.use_cases.study_use_case import StudyUseCase
from wordrecall.application.study.use_cases.word_list_use_case import WordListUseCase
from wordrecall.config import get_settings
from wordrecall.domain.study.services.list_parser import ListParser
from wordrecall.infrastructure.identity.repositories.user_repository import UserRepository
from wordrecall.infrastructure.identity.services import (
    PasswordServiceAdapter,
    TokenServiceAdapter,
)
from wordrecall.infrastructure.study.repositories.word_list_repository import (
    WordListRepository,
)
from wordrecall.infrastructure.study.stores import (
    InMemoryResultsStore,
    InMemoryStudySessionStore,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    word_list_repository = providers.Factory(WordListRepository, db=db)

    # Process-wide transient stores
    study_session_store = providers.Singleton(
        InMemoryStudySessionStore,
        ttl_minutes=settings.provided.STUDY_SESSION_TTL_MINUTES,
    )
    results_store = providers.Singleton(InMemoryResultsStore)

    # Identity services
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # Domain services (pure domain logic, no db)
    list_parser = providers.Factory(ListParser)

    # Study module, application use cases
    word_list_use_case = providers.Factory(
        WordListUseCase,
        word_list_repository=word_list_repository,
        user_repository=user_repository,
        results_store=results_store,
        list_parser=list_parser,
    )
    study_use_case = providers.Factory(
        StudyUseCase,
        word_list_repository=word_list_repository,
        session_store=study_session_store,
        results_store=results_store,
        recent_limit=settings.provided.RECENTLY_REMEMBERED_LIMIT,
    )

    # Identity use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )


# Initialize container
container = Container()
