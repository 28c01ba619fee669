from __future__ import annotations

from dependency_injector import containers, providers

from infra.resources import DatabaseResource


class InfrastructureContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    # Database (owns the connection pool)
    database = providers.Resource(
        DatabaseResource,
        database_url=providers.Callable(str, config.DATABASE.DATABASE_URL),
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Application services - depends on infrastructure."""

    config = providers.Configuration()

    password_hasher = providers.Singleton(
        "api.features.auth.security.PasswordHasher",
        rounds=config.SECURITY.BCRYPT_ROUNDS,
    )

    # Services
    auth_service = providers.Factory(
        "api.features.auth.service.AuthService",
        password_hasher=password_hasher,
    )

    conversation_service = providers.Factory(
        "api.features.conversation.service.ConversationService",
    )

    advice_service = providers.Factory(
        "api.features.advice.service.AdviceService",
        api_key=config.GEMINI.GEMINI_API_KEY,
        model=config.GEMINI.GEMINI_MODEL,
        base_url=config.GEMINI.GEMINI_BASE_URL,
        prompt_template=config.GEMINI.ADVICE_PROMPT_TEMPLATE,
        temperature=config.GEMINI.GEMINI_TEMPERATURE,
        top_k=config.GEMINI.GEMINI_TOP_K,
        top_p=config.GEMINI.GEMINI_TOP_P,
    )


class ControllerContainer(containers.DeclarativeContainer):
    """Controller-specific dependencies."""

    services = providers.DependenciesContainer()

    # Controllers
    auth_controller = providers.Factory(
        "api.features.auth.controller.AuthController",
        auth_service=services.auth_service,
    )

    conversation_controller = providers.Factory(
        "api.features.conversation.controller.ConversationController",
        conversation_service=services.conversation_service,
    )

    advice_controller = providers.Factory(
        "api.features.advice.controller.AdviceController",
        advice_service=services.advice_service,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Main application container composing all sub-containers."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "api.shared.db",
            "api.features.auth.router",
            "api.features.conversation.router",
            "api.features.advice.router",
        ]
    )

    config = providers.Configuration()
    infrastructure = providers.Container(InfrastructureContainer, config=config)
    services = providers.Container(ServiceContainer, config=config)
    controllers = providers.Container(ControllerContainer, services=services)
