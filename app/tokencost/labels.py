"""
UI text for the two supported locales.
Keys are stable identifiers used by app.py; field labels are keyed by the
usage dataclass field names.
"""

from __future__ import annotations
from decimal import Decimal

from .models import Locale, Scenario

LABELS: dict[Locale, dict[str, str]] = {
    Locale.JA: {
        "title": "Geminiチャット利用コスト計算ツール",
        "settings": "設定",
        "language": "表示言語",
        "variant": "計算モード",
        "variant.simple": "シンプル（英語想定）",
        "variant.japanese": "日本語チャット",
        "variant.dual": "社内利用 / 顧客対応",
        "tier": "Geminiモデル選択",
        "reset": "入力をリセット",
        "scenario.internal": "社内利用",
        "scenario.customer": "顧客問い合わせ対応",
        "inputs.title": "チャット利用パラメータ",
        "inputs.caption": "チャットの利用想定を入力してください",
        "results.title": "月間コスト分析結果",
        "results.caption": "推定される月間利用コスト",
        "prompt_chars_per_message": "1回のプロンプト文字数",
        "output_chars_per_message": "1回の出力文字数",
        "messages_per_user_per_day": "1人1日あたりのチャット回数",
        "number_of_users": "利用者数",
        "prompt_chars_per_inquiry": "1件あたりの問い合わせ文字数",
        "output_chars_per_inquiry": "1件あたりの回答文字数",
        "inquiries_per_day": "1日あたりの問い合わせ件数",
        "ai_handled_fraction": "AI対応率（0〜1）",
        "monthly_input_tokens": "月間入力トークン数",
        "monthly_output_tokens": "月間出力トークン数",
        "monthly_cost_usd": "月間推定コスト ($)",
        "monthly_cost_jpy": "月間推定コスト (円)",
        "breakdown": "内訳",
        "monthly_input_cost_usd": "入力コスト ($)",
        "monthly_output_cost_usd": "出力コスト ($)",
        "interactions_per_month": "月間やり取り回数",
        "note.ratio": "※日本語テキストは1トークン≒{ratio}文字で換算",
        "note.ratio_en": "※英語テキストは1トークン≒{ratio}文字で換算",
        "note.history": "※チャット履歴の蓄積による追加トークン消費は含まれていません",
        "note.fx": "※米ドル→日本円は1ドル={rate}円で概算",
        "note.pricing": "※最新のGemini料金に基づいて計算",
        "sample.title": "サンプル文の文字数を測る",
        "sample.input": "代表的なプロンプトを貼り付け",
        "sample.chars": "文字数",
        "sample.tokens": "推定トークン数",
    },
    Locale.EN: {
        "title": "Gemini Chat Cost Calculator",
        "settings": "Settings",
        "language": "Language",
        "variant": "Calculator mode",
        "variant.simple": "Simple (English text)",
        "variant.japanese": "Japanese chat",
        "variant.dual": "Internal / customer",
        "tier": "Gemini model",
        "reset": "Reset inputs",
        "scenario.internal": "Internal usage",
        "scenario.customer": "Customer inquiries",
        "inputs.title": "Usage parameters",
        "inputs.caption": "Enter your expected chat usage",
        "results.title": "Monthly cost analysis",
        "results.caption": "Estimated monthly usage cost",
        "prompt_chars_per_message": "Prompt characters per message",
        "output_chars_per_message": "Output characters per message",
        "messages_per_user_per_day": "Chats per user per day",
        "number_of_users": "Number of users",
        "prompt_chars_per_inquiry": "Prompt characters per inquiry",
        "output_chars_per_inquiry": "Answer characters per inquiry",
        "inquiries_per_day": "Inquiries per day",
        "ai_handled_fraction": "AI-handled fraction (0-1)",
        "monthly_input_tokens": "Monthly input tokens",
        "monthly_output_tokens": "Monthly output tokens",
        "monthly_cost_usd": "Estimated monthly cost ($)",
        "monthly_cost_jpy": "Estimated monthly cost (JPY)",
        "breakdown": "Breakdown",
        "monthly_input_cost_usd": "Input cost ($)",
        "monthly_output_cost_usd": "Output cost ($)",
        "interactions_per_month": "Interactions per month",
        "note.ratio": "* Japanese text is converted at 1 token ≈ {ratio} characters",
        "note.ratio_en": "* English text is converted at 1 token ≈ {ratio} characters",
        "note.history": "* Extra tokens from accumulated chat history are not included",
        "note.fx": "* USD to JPY uses a flat rate of 1 USD = {rate} JPY",
        "note.pricing": "* Based on current Gemini pricing",
        "sample.title": "Measure a sample text",
        "sample.input": "Paste a representative prompt",
        "sample.chars": "Characters",
        "sample.tokens": "Estimated tokens",
    },
}


def _plain(value: Decimal) -> str:
    """150 -> '150', 1.50 -> '1.5' (no exponent notation)."""
    return f"{value.normalize():f}"


def t(locale: Locale | str, key: str, **kwargs) -> str:
    """Look up a label; falls back to English, then to the key itself."""
    table = LABELS.get(Locale(locale), LABELS[Locale.EN])
    text = table.get(key) or LABELS[Locale.EN].get(key, key)
    return text.format(**kwargs) if kwargs else text


def scenario_label(locale: Locale | str, scenario: Scenario) -> str:
    return t(locale, f"scenario.{scenario.value}")


def footnotes(
    locale: Locale | str,
    chars_per_token: Decimal,
    usd_to_jpy_rate: Decimal | None,
    japanese_text: bool = True,
) -> list[str]:
    """Notes shown under the results, in display order."""
    ratio_key = "note.ratio" if japanese_text else "note.ratio_en"
    notes = [
        t(locale, ratio_key, ratio=_plain(chars_per_token)),
        t(locale, "note.history"),
    ]
    if usd_to_jpy_rate is not None:
        notes.append(t(locale, "note.fx", rate=_plain(usd_to_jpy_rate)))
    notes.append(t(locale, "note.pricing"))
    return notes
