import re

from emr_scribe.structures.label_rule import LabelRule
from emr_scribe.structures.rewrite_rule import RewriteRule
from emr_scribe.structures.semantic_label import SemanticLabel

# first matching category wins, statements matching none are labelled as plain evidence
LABEL_RULES: list[LabelRule] = [
    LabelRule(
        label=SemanticLabel.CHIEF_COMPLAINT,
        pattern=re.compile(r"主诉|不舒服|哪里不适|chief complaint|bothering", re.IGNORECASE),
    ),
    LabelRule(
        label=SemanticLabel.PAST_HISTORY,
        pattern=re.compile(r"既往|病史|慢病|颈椎|history|chronic", re.IGNORECASE),
    ),
    LabelRule(
        label=SemanticLabel.SYMPTOM,
        pattern=re.compile(r"咳|痰|发热|气短|胸闷|睡|cough|phlegm|fever|breath|chest|sleep", re.IGNORECASE),
    ),
]

# colloquial symptom expression -> standardized term, applied in order
PHRASE_RULES: list[RewriteRule] = [
    RewriteRule(pattern=re.compile(r"睡不好|睡不着|睡眠差"), replacement="睡眠障碍"),
    RewriteRule(pattern=re.compile(r"老醒|容易醒|易醒"), replacement="夜间易醒"),
    RewriteRule(pattern=re.compile(r"白天有点困|白天困|白天疲劳|白天乏力"), replacement="日间嗜睡感"),
    RewriteRule(pattern=re.compile(r"心慌|心悸"), replacement="心悸"),
    RewriteRule(pattern=re.compile(r"出汗"), replacement="出汗"),
    RewriteRule(pattern=re.compile(r"不舒服|不适"), replacement="不适"),
    RewriteRule(pattern=re.compile(r"头晕"), replacement="头晕"),
    RewriteRule(pattern=re.compile(r"头痛"), replacement="头痛"),
    RewriteRule(pattern=re.compile(r"咳嗽"), replacement="咳嗽"),
    RewriteRule(pattern=re.compile(r"发烧|发热"), replacement="发热"),
    RewriteRule(pattern=re.compile(r"胸闷"), replacement="胸闷"),
    RewriteRule(pattern=re.compile(r"气短|呼吸不畅"), replacement="气短"),
    RewriteRule(pattern=re.compile(r"胃口不好|食欲差"), replacement="食欲减退"),
    RewriteRule(pattern=re.compile(r"肚子疼|腹痛"), replacement="腹痛"),
    RewriteRule(pattern=re.compile(r"拉肚子|腹泻"), replacement="腹泻"),
    RewriteRule(pattern=re.compile(r"便秘"), replacement="便秘"),
    RewriteRule(pattern=re.compile(r"失眠"), replacement="失眠"),
]

# hedging and intensity colloquialisms, applied after the phrase rules
HEDGE_RULES: list[RewriteRule] = [
    RewriteRule(pattern=re.compile(r"我(觉得|感觉)?"), replacement=""),
    RewriteRule(pattern=re.compile(r"可能|也许|好像|似乎|大概|应该|考虑"), replacement=""),
    RewriteRule(pattern=re.compile(r"有点|有些|一点|稍微"), replacement="轻度"),
    RewriteRule(pattern=re.compile(r"老是|总是"), replacement="易"),
    RewriteRule(pattern=re.compile(r"不明显"), replacement="轻度"),
    RewriteRule(pattern=re.compile(r"(轻度)+"), replacement="轻度"),
]

# colloquial recency phrase -> standardized duration, first match wins
TIME_RULES: list[RewriteRule] = [
    RewriteRule(pattern=re.compile(r"这两天|近两天|近二天|最近两天"), replacement="两天"),
    RewriteRule(pattern=re.compile(r"最近一周|近一周|近七天"), replacement="一周"),
    RewriteRule(pattern=re.compile(r"最近|近期|近来"), replacement="近期"),
    RewriteRule(pattern=re.compile(r"半个月|近半个月"), replacement="半月"),
]

TIME_NUMERIC_PATTERN = re.compile(r"([一二三四五六七八九十两\d]+)(天|日|周|个月|月|年)")
