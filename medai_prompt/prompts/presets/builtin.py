"""
Built-in preset definitions.

Provides the four purpose tabs (medical device, clinical operation, research
ethics, generative AI) and the default option lists offered in the editor.
"""

from .schema import TabPreset


# Date the base template's guideline assumptions refer to
TEMPLATE_BASE_DATE = "2026-02-04"

DISCLAIMER_LINES = [
    "本ツールは情報整理支援であり、法的助言・医学的助言ではありません。",
    "個別ケースについては有資格者など専門家にご相談下さい。",
    f"テンプレートは{TEMPLATE_BASE_DATE.replace('-', '/')}時点の指針に基づきます。最新情報は一次資料で確認してください。",
]

DEFAULT_PRIORITY_DOMAINS = [
    "mhlw.go.jp",
    "pmda.go.jp",
    "meti.go.jp",
    "soumu.go.jp",
    "ppc.go.jp",
    "digital.go.jp",
    "cao.go.jp",
    "e-gov.go.jp",
]

DEFAULT_SCOPE_OPTIONS = [
    "医療AI",
    "生成AI",
    "SaMD",
    "医療情報セキュリティ",
    "医療データ利活用",
    "研究倫理",
]

DEFAULT_AUDIENCE_OPTIONS = [
    "医療機関",
    "医療機器メーカー",
    "SaMD開発企業",
    "研究者",
    "医療情報システム事業者",
    "自治体・行政",
]


# Medical Device - SaMD and AI medical device development and approval
MEDICAL_DEVICE_PRESET = TabPreset(
    id="medical-device",
    name="医療機器・SaMD",
    description="SaMD・AI医療機器の開発・申請",
    categories=[
        "法令・制度",
        "SaMD・プログラム医療機器",
        "承認審査・薬事手続",
        "品質管理・市販後安全対策",
        "サイバーセキュリティ",
        "個人情報・データ利活用",
    ],
    keyword_chips=[
        "SaMD",
        "プログラム医療機器",
        "PMDA",
        "薬機法",
        "AI医療機器",
        "DASH for SaMD",
        "IDATEN",
    ],
)


# Clinical Operation - introducing and running AI in healthcare institutions
CLINICAL_OPERATION_PRESET = TabPreset(
    id="clinical-operation",
    name="臨床運用",
    description="医療機関でのAI導入・運用",
    categories=[
        "法令・制度",
        "医療情報システム安全管理",
        "医療機関の運用・体制",
        "個人情報・データ利活用",
        "サイバーセキュリティ",
        "診療報酬・評価",
    ],
    keyword_chips=[
        "医療情報システムの安全管理",
        "医療機関",
        "AI導入",
        "クラウドサービス",
        "サイバーセキュリティ",
        "診療支援",
    ],
)


# Research Ethics - clinical research and ethics review
RESEARCH_ETHICS_PRESET = TabPreset(
    id="research-ethics",
    name="研究倫理",
    description="臨床研究・倫理審査対応",
    categories=[
        "法令・制度",
        "研究倫理指針",
        "倫理審査・インフォームドコンセント",
        "個人情報・データ利活用",
        "次世代医療基盤法",
    ],
    keyword_chips=[
        "人を対象とする生命科学・医学系研究",
        "倫理指針",
        "倫理審査委員会",
        "インフォームド・コンセント",
        "仮名加工情報",
        "次世代医療基盤法",
    ],
)


# Generative AI - use and governance of generative AI
GENERATIVE_AI_PRESET = TabPreset(
    id="generative-ai",
    name="生成AI",
    description="生成AI活用・ガバナンス",
    categories=[
        "法令・制度",
        "AIガバナンス・事業者ガイドライン",
        "生成AIの利用・リスク管理",
        "個人情報・データ利活用",
        "医療情報システム安全管理",
    ],
    keyword_chips=[
        "生成AI",
        "AI事業者ガイドライン",
        "大規模言語モデル",
        "AIガバナンス",
        "個人情報保護",
        "ハルシネーション",
    ],
)


def get_builtin_presets() -> list[TabPreset]:
    """Get all built-in presets in tab order.

    Returns:
        A list of the built-in TabPreset instances.
    """
    return [
        MEDICAL_DEVICE_PRESET,
        CLINICAL_OPERATION_PRESET,
        RESEARCH_ETHICS_PRESET,
        GENERATIVE_AI_PRESET,
    ]
