import re

from emr_scribe.libraries.rule_tables import HEDGE_RULES, PHRASE_RULES, TIME_NUMERIC_PATTERN, TIME_RULES
from emr_scribe.structures.emr_draft import EmrDraft
from emr_scribe.structures.medical_emr import MedicalEmr
from emr_scribe.structures.rewrite_rule import RewriteRule
from emr_scribe.structures.speaker import Speaker
from emr_scribe.structures.turn import Turn


class MedicalRewrite:
    """
    Deterministic conversion of the patient's colloquial language into a standardized record.

    No external call, no randomness: the same turns always give the same record.
    """

    SENTENCE_SPLIT = re.compile(r"[，。,.；;！!？?]")
    CLAUSE_SPLIT = re.compile(r"[，、,.]")
    PUNCTUATION_RUN = re.compile(r"[，。,.]+")
    DEFAULT_TIME_PHRASE = "近期"
    DEFAULT_SYMPTOM = "不适"
    MAX_CHIEF_COMPLAINT_SYMPTOMS = 2
    SYMPTOM_SEPARATOR = "、"
    PAST_HISTORY_PLACEHOLDER = "未提及既往史"
    PRESENT_ILLNESS_TEMPLATE = "患者{time}出现{body}，目前症状仍在，需进一步问诊完善病史。"
    SUMMARY_OPENING = "本次就诊，"
    SECTION_CHIEF_COMPLAINT = "主诉"
    SECTION_PRESENT_ILLNESS = "现病史"
    SECTION_PAST_HISTORY = "既往史"

    @classmethod
    def draft_from(cls, turns: list[Turn]) -> EmrDraft:
        doctor_questions = [turn.text for turn in turns if turn.speaker == Speaker.DOCTOR]
        patient_responses = [turn.text for turn in turns if turn.speaker == Speaker.PATIENT]
        first_response = patient_responses[0] if patient_responses else ""
        return EmrDraft(
            chief_complaint=first_response,
            present_illness=first_response,
            doctor_questions=doctor_questions,
            patient_responses=patient_responses,
            reported_symptoms=[
                segment
                for response in patient_responses
                for part in cls.SENTENCE_SPLIT.split(response)
                if (segment := part.strip())
            ],
        )

    @classmethod
    def from_turns(cls, turns: list[Turn]) -> MedicalEmr:
        return cls.rewrite(cls.draft_from(turns))

    @classmethod
    def rewrite(cls, draft: EmrDraft) -> MedicalEmr:
        base_text = draft.present_illness or draft.chief_complaint
        if not base_text.strip():
            return MedicalEmr.empty()

        time_phrase = cls.extract_time_phrase(base_text)
        chief_complaint = cls.chief_complaint_from_symptoms(time_phrase, draft.reported_symptoms)
        if not chief_complaint:
            chief_complaint = cls.chief_complaint_from(draft.chief_complaint or base_text, time_phrase)
        present_illness = cls.present_illness_from(base_text, time_phrase)
        past_history = cls.PAST_HISTORY_PLACEHOLDER
        return MedicalEmr(
            chief_complaint=chief_complaint,
            present_illness=present_illness,
            past_history=past_history,
            summary=cls.summary_from(chief_complaint, present_illness, past_history),
        )

    @classmethod
    def apply_rules(cls, text: str, rules: list[RewriteRule]) -> str:
        result = text
        for rule in rules:
            result = rule.apply(result)
        return result

    @classmethod
    def rewrite_text(cls, text: str) -> str:
        result = text.strip()
        if not result:
            return ""
        result = cls.apply_rules(result, PHRASE_RULES)
        result = cls.apply_rules(result, HEDGE_RULES)
        result = cls.PUNCTUATION_RUN.sub("，", result)
        return result.strip().strip("，").strip()

    @classmethod
    def is_symptom(cls, text: str) -> bool:
        return any(rule.pattern.search(text) for rule in PHRASE_RULES)

    @classmethod
    def extract_time_phrase(cls, text: str) -> str:
        if numeric := TIME_NUMERIC_PATTERN.search(text):
            return f"{numeric.group(1)}{numeric.group(2)}"
        for rule in TIME_RULES:
            if rule.pattern.search(text):
                return rule.replacement
        return cls.DEFAULT_TIME_PHRASE

    @classmethod
    def strip_time_phrase(cls, text: str) -> str:
        result = text
        for rule in TIME_RULES:
            result = rule.pattern.sub("", result)
        return TIME_NUMERIC_PATTERN.sub("", result)

    @classmethod
    def chief_complaint_from_symptoms(cls, time_phrase: str, symptoms: list[str]) -> str:
        segments: list[str] = []
        for symptom in symptoms:
            body = cls.strip_time_phrase(symptom)
            if not cls.is_symptom(body):
                continue
            rewritten = cls.rewrite_text(body)
            if rewritten and rewritten not in segments:
                segments.append(rewritten)
            if len(segments) == cls.MAX_CHIEF_COMPLAINT_SYMPTOMS:
                break
        return cls.SYMPTOM_SEPARATOR.join(f"{segment}{time_phrase}" for segment in segments)

    @classmethod
    def chief_complaint_from(cls, text: str, time_phrase: str) -> str:
        body = cls.rewrite_text(cls.strip_time_phrase(text)) or cls.DEFAULT_SYMPTOM
        symptom = cls.CLAUSE_SPLIT.split(body)[0].strip() or cls.DEFAULT_SYMPTOM
        return f"{symptom}{time_phrase}"

    @classmethod
    def present_illness_from(cls, text: str, time_phrase: str) -> str:
        body = cls.rewrite_text(cls.strip_time_phrase(text)) or cls.DEFAULT_SYMPTOM
        return cls.PRESENT_ILLNESS_TEMPLATE.format(time=time_phrase, body=body)

    @classmethod
    def summary_from(cls, chief_complaint: str, present_illness: str, past_history: str) -> str:
        parts = [
            f"{section}：{content.rstrip('。')}"
            for section, content in [
                (cls.SECTION_CHIEF_COMPLAINT, chief_complaint),
                (cls.SECTION_PRESENT_ILLNESS, present_illness),
                (cls.SECTION_PAST_HISTORY, past_history),
            ]
            if content
        ]
        if not parts:
            return ""
        return f"{cls.SUMMARY_OPENING}{'。'.join(parts)}。"
