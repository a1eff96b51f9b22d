from __future__ import annotations

from typing import Optional

from flask import Flask

from swot_web.config import AppSettings, IniConfig, setup_logging
from swot_web.repositories.analysis_repository import AnalysisRepository
from swot_web.repositories.json_store import JsonFileStore, Store
from swot_web.repositories.user_repository import SessionRepository, UserRepository
from swot_web.services.ab_test_service import AbTestService
from swot_web.services.analysis_service import AnalysisService
from swot_web.services.auth_service import AuthService
from swot_web.services.digest_service import DigestService
from swot_web.services.metrics_service import MetricsStore
from swot_web.services.swot_extractor import SwotExtractor
from swot_web.services.variant_assigner import VariantAssigner
from swot_web.web.routes import create_blueprint


def create_app(settings: Optional[AppSettings] = None, store: Optional[Store] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = JsonFileStore(data_dir=settings.data_dir)

    # One metrics store per process; every service shares this instance.
    metrics = MetricsStore(store)
    ab_test = AbTestService(assigner=VariantAssigner(), metrics=metrics)

    auth_service = AuthService(
        users=UserRepository(store),
        sessions=SessionRepository(store),
        session_ttl_seconds=settings.session_ttl_seconds,
    )

    analysis_service = AnalysisService(
        extractor=SwotExtractor(),
        ab_test=ab_test,
        analysis_repo=AnalysisRepository(store),
    )

    digest_service = DigestService(store=store)

    app = Flask(__name__)
    app.register_blueprint(
        create_blueprint(analysis_service, auth_service, ab_test, digest_service, settings)
    )

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    # Repositories rewrite whole files with no locking; serve one request at a time.
    app.config["THREADED"] = False
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length

    app.logger.info("Data directory: %s", settings.data_dir)
    return app

#############################
#
# Key design patterns used
# •	Application Factory: create_app() builds the app and dependencies.
# •	Dependency Injection (manual): services get their repositories/stores through constructors.
# •	Service Layer: AnalysisService, AuthService, AbTestService, DigestService hold the use cases.
# •	Repository: Analysis/User/Session repositories sit on top of the Store port.
# •	Port/Adapter: Store is the persistence port, JsonFileStore the whole-file JSON adapter.
######################################################################
# Runtime request flow
# •	POST /api/generate
#    routes.generate -> AnalysisService.generate
#      SwotExtractor.analyze_all (KeywordMatcher per sentence)
#      AbTestService.serve_variant -> VariantAssigner.assign + MetricsStore.record_view
#    -> {variant, results}
# •	POST /api/analysis (bearer token)
#    AuthService.resolve_user_id -> AnalysisService.create -> AnalysisRepository.add
#    metrics and analyses are two separate whole-file writes, no transaction spans them
# •	GET /integration.js
#    snippet asks /api/variant once, keeps the answer on <body data-variant>, and posts it
#    back to /api/convert; the server never remembers who got which variant
