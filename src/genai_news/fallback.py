"""Static sample articles shown when a fetch fails outright."""

from datetime import UTC, datetime

from genai_news.data import NewsArticle

_SAMPLES: tuple[dict[str, str], ...] = (
    {
        "id": "sample-1",
        "title": "OpenAI Releases GPT-4 Turbo with Enhanced Capabilities and Reduced Costs",
        "original_text": """\
OpenAI has announced the release of GPT-4 Turbo, a significant update to their flagship language model that promises enhanced reasoning capabilities and substantially reduced costs for developers and businesses.

The new model features improved performance across multiple domains, including better code generation, mathematical reasoning, and creative writing. According to OpenAI's internal benchmarks, GPT-4 Turbo shows a 25% improvement in complex reasoning tasks compared to its predecessor.

Key improvements include:
- Enhanced context window supporting up to 128,000 tokens
- Reduced API pricing by 50% for input tokens and 25% for output tokens
- Improved instruction following and reduced hallucinations
- Better performance on coding tasks and technical documentation
- Enhanced multilingual capabilities

The model is now available through OpenAI's API with immediate access for existing customers. Enterprise customers will receive priority access to the new features, including advanced fine-tuning capabilities and dedicated compute resources.""",
        "translated_text": """\
OpenAIは、主力言語モデルの大幅なアップデートであるGPT-4 Turboのリリースを発表しました。このモデルは、推論能力の向上と開発者・企業向けのコスト大幅削減を約束しています。

新しいモデルは、より良いコード生成、数学的推論、創作文章など、複数の領域でパフォーマンスが向上しています。OpenAIの内部ベンチマークによると、GPT-4 Turboは前モデルと比較して複雑な推論タスクで25%の改善を示しています。

主な改善点：
- 最大128,000トークンをサポートする拡張されたコンテキストウィンドウ
- 入力トークンで50%、出力トークンで25%のAPI価格削減
- 指示追従の改善と幻覚の減少
- コーディングタスクと技術文書でのパフォーマンス向上
- 多言語機能の強化

このモデルは現在、OpenAIのAPIを通じて既存顧客に即座にアクセス可能です。エンタープライズ顧客は、高度なファインチューニング機能や専用計算リソースを含む新機能への優先アクセスを受けられます。""",
        "source": "OpenAI Blog",
        "url": "https://openai.com/blog/gpt-4-turbo",
    },
    {
        "id": "sample-2",
        "title": "Google Announces Gemini 2.0 with Multimodal AI Capabilities",
        "original_text": """\
Google has unveiled Gemini 2.0, its most advanced AI model yet, featuring groundbreaking multimodal capabilities that can process text, images, audio, and video simultaneously. The new model represents a significant leap forward in AI technology and sets new benchmarks for performance across various tasks.

Gemini 2.0 introduces several revolutionary features:
- Native multimodal understanding without separate processing pipelines
- Real-time video analysis and generation capabilities
- Advanced reasoning across different media types
- Improved safety measures and alignment protocols
- Enhanced efficiency with reduced computational requirements

The model has been integrated into Google's suite of products, including Search, Assistant, and Workspace applications. Early testing shows remarkable improvements in complex reasoning tasks, with the model demonstrating human-level performance in many areas.

"Gemini 2.0 represents our vision of AI that truly understands the world as humans do," said Sundar Pichai, CEO of Google. "This is not just about processing different types of data, but about creating genuine understanding across modalities.\"""",
        "translated_text": """\
Googleは、テキスト、画像、音声、動画を同時に処理できる画期的なマルチモーダル機能を特徴とする最も高度なAIモデル、Gemini 2.0を発表しました。この新しいモデルはAI技術における大きな飛躍を表し、様々なタスクでパフォーマンスの新しいベンチマークを設定しています。

Gemini 2.0はいくつかの革新的な機能を導入しています：
- 別々の処理パイプラインを必要としないネイティブマルチモーダル理解
- リアルタイム動画分析と生成機能
- 異なるメディアタイプ間での高度な推論
- 改善された安全対策と整合プロトコル
- 計算要件を削減した効率性の向上

このモデルは、検索、アシスタント、Workspaceアプリケーションを含むGoogleの製品スイートに統合されています。初期テストでは複雑な推論タスクで顕著な改善が示され、多くの分野で人間レベルのパフォーマンスを実証しています。

「Gemini 2.0は、人間と同じように世界を真に理解するAIという我々のビジョンを表しています」と、GoogleのCEOであるサンダー・ピチャイは述べました。「これは単に異なるタイプのデータを処理することではなく、モダリティ間での真の理解を創造することです。」""",
        "source": "Google AI Blog",
        "url": "https://ai.googleblog.com/gemini-2-0",
    },
    {
        "id": "sample-3",
        "title": "Microsoft Copilot Gets Major Update with Advanced AI Reasoning",
        "original_text": """\
Microsoft has announced a significant update to its Copilot AI assistant, introducing advanced reasoning capabilities that promise to transform how users interact with AI-powered productivity tools. The update brings enhanced problem-solving abilities and more sophisticated understanding of complex tasks.

The new reasoning engine can now handle multi-step problems, analyze complex data relationships, and provide detailed explanations for its recommendations. This represents a major leap forward from previous versions that primarily focused on text generation and basic task automation.

Enhanced capabilities include:
- Advanced mathematical and logical reasoning
- Complex data analysis and visualization suggestions
- Multi-document synthesis and comparison
- Improved code debugging and optimization recommendations
- Enhanced natural language understanding for technical queries

The update also introduces a new "Reasoning Mode" that allows users to see the AI's thought process step-by-step. This transparency feature helps users understand how Copilot arrives at its conclusions and builds trust in AI-generated recommendations.""",
        "translated_text": """\
Microsoftは、AI搭載生産性ツールとのユーザーインタラクションを変革することを約束する高度な推論機能を導入し、CopilotAIアシスタントの大幅なアップデートを発表しました。このアップデートは、強化された問題解決能力と複雑なタスクのより洗練された理解をもたらします。

新しい推論エンジンは、多段階の問題を処理し、複雑なデータ関係を分析し、その推薦事項について詳細な説明を提供できるようになりました。これは、主にテキスト生成と基本的なタスク自動化に焦点を当てていた以前のバージョンからの大きな飛躍を表しています。

強化された機能：
- 高度な数学的・論理的推論
- 複雑なデータ分析と可視化提案
- 複数文書の統合と比較
- 改善されたコードデバッグと最適化推薦
- 技術的クエリに対する強化された自然言語理解

このアップデートでは、ユーザーがAIの思考プロセスを段階的に確認できる新しい「推論モード」も導入されています。この透明性機能は、ユーザーがCopilotがどのように結論に到達するかを理解し、AI生成の推薦事項への信頼を構築するのに役立ちます。""",
        "source": "Microsoft News",
        "url": "https://news.microsoft.com/copilot-reasoning-update",
    },
)


def fallback_articles(published_at: str | None = None) -> list[NewsArticle]:
    """Return the three pre-translated sample articles, always in the same order.

    Args:
        published_at: Timestamp to stamp on every sample. Defaults to now.
    """
    stamp = published_at or datetime.now(tz=UTC).isoformat()
    return [NewsArticle(published_at=stamp, **sample) for sample in _SAMPLES]
