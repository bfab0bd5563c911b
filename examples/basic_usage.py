"""Basic usage examples for Sentilyzer."""

from sentilyzer import AnalysisSession, LLMServiceFactory
from sentilyzer.core.highlight import highlight_keywords
from sentilyzer.core.scoring import compute_batch_stats
from sentilyzer.utils.data_prep import export_filename, results_to_csv, write_export
from sentilyzer.utils.text_source import normalize_file_content

REVIEWS = """
I love this product, it changed my life!
The delivery was late and the box was damaged.
It's fine. Does what it says.
"""


def example_batch_analysis():
    """Example: classify a few reviews and summarize them."""
    print("🔍 Analyzing sample reviews")

    texts = normalize_file_content(REVIEWS)
    classifier = LLMServiceFactory.create()
    session = AnalysisSession()

    results = session.run(texts, classifier)
    if session.error:
        print(f"❌ {session.error}")
        return

    stats = compute_batch_stats(results)
    print(f"📊 {stats.total} items, avg confidence {stats.avg_confidence}%, dominant {stats.dominant.value}")

    for result in results:
        marked = "".join(
            f"[{span.text}]" if span.is_keyword else span.text
            for span in highlight_keywords(result.original_text, result.keywords)
        )
        print(f"  {result.sentiment.value:<8} {result.confidence:.2f}  {marked}")

    filename = export_filename("csv")
    write_export(results_to_csv(results), filename)
    print(f"💾 Saved {filename}")


if __name__ == "__main__":
    example_batch_analysis()
