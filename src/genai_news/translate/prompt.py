"""Japanese translation prompt."""

TRANSLATION_PROMPT = """\
以下のテキストを自然な日本語に翻訳してください。要約や省略はせず、元の内容をそのまま翻訳してください。既に日本語の場合はそのまま返してください。

テキスト:
{text}

翻訳:"""

# Shown in place of a translation when the generation call fails
TRANSLATION_FAILED = "翻訳に失敗しました"


def build_translation_prompt(text: str) -> str:
    """Build a prompt asking for a full, unsummarised Japanese translation.

    Text that is already Japanese is to be returned unchanged.
    """
    return TRANSLATION_PROMPT.format(text=text)
