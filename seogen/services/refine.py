from typing import List, Sequence


def refine_headline(headline: str, new_keyword: str) -> str:
    """
    Make a single headline lead with `new_keyword`.

      - "Old: body"  -> "New: body"   (only the first colon separates the prefix)
      - "body"       -> "New: body"   (keyword absent)
      - "New stuff"  -> "New stuff"   (keyword already present, any case)
    """
    text = headline.strip()
    if ":" in text:
        _, body = text.split(":", 1)
        return f"{new_keyword}: {body.strip()}"
    if new_keyword.lower() in text.lower():
        return text
    return f"{new_keyword}: {text}"


def refine_headlines(headlines: Sequence[str], new_keyword: str) -> List[str]:
    return [refine_headline(h, new_keyword) for h in headlines]
