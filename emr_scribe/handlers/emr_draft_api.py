from http import HTTPStatus
from json import JSONDecodeError
from uuid import uuid4

from canvas_sdk.effects import Effect
from canvas_sdk.effects.simple_api import Response, JSONResponse
from canvas_sdk.handlers.simple_api import SimpleAPI, Credentials, api
from logger import log

from emr_scribe.libraries.authenticator import Authenticator
from emr_scribe.libraries.constants import Constants
from emr_scribe.libraries.evidence_indexer import EvidenceIndexer
from emr_scribe.libraries.helper import Helper
from emr_scribe.libraries.memory_log import MemoryLog
from emr_scribe.libraries.orchestrator import Orchestrator
from emr_scribe.structures.error_kind import ErrorKind
from emr_scribe.structures.generation_request import GenerationRequest
from emr_scribe.structures.generation_result import GenerationResult
from emr_scribe.structures.settings import Settings
from emr_scribe.structures.statement import Statement


class EmrDraftApi(SimpleAPI):
    PREFIX = None
    INVALID_BODY = "the body must be a JSON object"

    def authenticate(self, credentials: Credentials) -> bool:
        return Authenticator.check(
            self.secrets.get(Constants.SECRET_API_SIGNING_KEY) or "",
            Constants.API_SIGNED_EXPIRATION_SECONDS,
            self.request.query_params,
        )

    def content(self) -> dict | None:
        try:
            content = self.request.json()
        except (JSONDecodeError, UnicodeDecodeError):
            return None
        if isinstance(content, dict):
            return content
        return None

    @classmethod
    def invalid_body(cls) -> list[Response | Effect]:
        return [JSONResponse({"error": cls.INVALID_BODY}, status_code=HTTPStatus.BAD_REQUEST)]

    @classmethod
    def failure_response(cls, result: GenerationResult) -> list[Response | Effect]:
        error_kind = result.error_kind or ErrorKind.UPSTREAM_MALFORMED
        return [
            JSONResponse(
                {"error": result.message, "kind": error_kind.value},
                status_code=error_kind.http_status(),
            )
        ]

    @api.post("/emr-draft")
    def emr_draft(self) -> list[Response | Effect]:
        content = self.content()
        if content is None:
            return self.invalid_body()

        request_uuid = str(uuid4())
        settings = Settings.from_dictionary(self.secrets)
        memory_log = MemoryLog(request_uuid, "emr_draft")
        result = Orchestrator(settings, memory_log).extract_request(
            GenerationRequest.load_from_json(content),
            settings.llm_timeout,
        )
        log.info(MemoryLog.end_session(request_uuid))

        if result.succeeded and result.record is not None:
            return [JSONResponse(result.record.to_json(), status_code=HTTPStatus.OK)]
        return self.failure_response(result)

    @api.post("/emr-rewrite")
    def emr_rewrite(self) -> list[Response | Effect]:
        content = self.content()
        if content is None:
            return self.invalid_body()

        conversation = content.get("conversation")
        statements = [Statement(text=conversation.strip())] if isinstance(conversation, str) else []

        request_uuid = str(uuid4())
        memory_log = MemoryLog(request_uuid, "emr_rewrite")
        result = Orchestrator(Settings.from_dictionary(self.secrets), memory_log).rewrite(statements)
        log.info(MemoryLog.end_session(request_uuid))

        if result.succeeded and result.medical_emr is not None:
            return [JSONResponse(result.medical_emr.to_json(), status_code=HTTPStatus.OK)]
        return self.failure_response(result)

    @api.post("/emr-evidence")
    def emr_evidence(self) -> list[Response | Effect]:
        content = self.content()
        if content is None:
            return self.invalid_body()

        language = Helper.language_or_default(content.get("language"))
        statements = content.get("statements")
        if not isinstance(statements, list):
            statements = []
        blocks = EvidenceIndexer.index([s for s in Statement.load_from_json(statements) if s.text])
        return [
            JSONResponse(
                {
                    "evidence": [block.to_json() | {"display": block.display_label(language)} for block in blocks],
                    "validIds": [block.id for block in blocks],
                },
                status_code=HTTPStatus.OK,
            )
        ]
