from http import HTTPStatus

from requests import RequestException

from emr_scribe.libraries.generation_errors import (
    ConfigurationMissingError,
    UpstreamMalformedError,
    UpstreamUnavailableError,
)
from emr_scribe.libraries.helper import Helper
from emr_scribe.libraries.memory_log import MemoryLog
from emr_scribe.structures.generation_request import GenerationRequest
from emr_scribe.structures.settings import Settings


class RecordExtractor:
    NO_CONTENT = "无"

    def __init__(self, settings: Settings, memory_log: MemoryLog):
        self.settings = settings
        self.memory_log = memory_log

    @classmethod
    def system_prompt(cls) -> list[str]:
        return [
            "你是病历结构化助理（EMR Draft Generator）。",
            "只能基于输入内容生成结果，不补充未出现的信息。",
            "绝对禁止诊断、治疗建议、病因推测或不确定性判断词。",
            "输入为原始就诊对话，不保证角色标注，请自行从语义中提取信息。",
            "输出必须是严格 JSON，且仅包含以下字段：",
            '{"chief_complaint":{"text":"","evidenceIds":[]},'
            '"present_illness":{"text":"","evidenceIds":[]},'
            '"past_history":{"text":"","evidenceIds":[]},'
            '"diagnostic_assessment":{"text":"","evidenceIds":[]},'
            '"summary":""}',
            "主诉为1到2个症状，每个症状格式为“症状词+时间”。",
            "现病史为围绕主诉的时间性经过描述，使用中文医学书面表达。",
            "既往史为历史对话中的事实性整理，如未提及则写“未提及明确既往史”。",
            "diagnostic_assessment 仅整理供医生评估的要点，不给出诊断、治疗方案或处方，必须写明“仅供医生参考”。",
            "summary 为客观概述，不诊断、不建议、不使用“可能/考虑”。",
            '每个 evidenceIds 为证据编号数组，如 ["E1","E2"]，编号必须来自证据时间线。',
        ]

    @classmethod
    def user_prompt(cls, request: GenerationRequest) -> list[str]:
        evidence_lines = "\n".join(f"{line.id}: {line.text}" for line in request.evidence)
        return [
            "当前就诊对话：",
            request.conversation_text,
            "历史对话记录：",
            request.history_text or cls.NO_CONTENT,
            "证据时间线：",
            evidence_lines or cls.NO_CONTENT,
        ]

    def extract(self, request: GenerationRequest, timeout: int | None) -> object:
        """
        Send the request to the configured LLM, once, and return the JSON payload of its reply.

        The payload is untrusted: it still has to go through the RecordValidator.
        """
        if not self.settings.has_llm_key():
            raise ConfigurationMissingError("missing the text LLM key")

        chatter = Helper.chatter(self.settings, self.memory_log)
        chatter.set_system_prompt(self.system_prompt())
        chatter.set_user_prompt(self.user_prompt(request))
        try:
            response = chatter.chat(timeout)
        except RequestException as e:
            raise UpstreamUnavailableError(f"transport failure: {e}") from e

        if response.code != HTTPStatus.OK.value:
            raise UpstreamUnavailableError(f"upstream status {response.code}", payload=response.response)

        extract = chatter.extract_json_from(response.response)
        if extract.has_error:
            raise UpstreamMalformedError(f"upstream reply is not JSON: {extract.error}", payload=response.response)
        return extract.content
