"""
Optional: print a suggestion set by calling the orchestrator directly.
Uses mock data unless GEMINI_API_KEY is set.
"""
import json
import sys

from seogen.config import settings
from seogen.services.llm import build_client
from seogen.services.orchestrator import request_suggestions
from seogen.services.refine import refine_headlines

if __name__ == "__main__":
    keyword = sys.argv[1] if len(sys.argv) > 1 else "used car financing"
    new_keyword = sys.argv[2] if len(sys.argv) > 2 else None

    result = request_suggestions(
        "Used car dealership offering flexible payment options",
        keyword,
        ["buy now pay later", "zero down payment"],
        client=build_client(settings),
    )
    if new_keyword:
        result.headlines = refine_headlines(result.headlines, new_keyword)
    print(json.dumps(result.model_dump(by_alias=True), indent=2))
