import json, re

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text or "").strip()


def strict_json_loads(text: str):
    """Return the first balanced {...} object in text that parses as JSON."""
    text = strip_code_fences(text)
    starts = [m.start() for m in re.finditer(r'\{', text)]
    for s in starts:
        depth = 0
        for i, ch in enumerate(text[s:], start=s):
            if ch == '{': depth += 1
            elif ch == '}':
                depth -= 1
                if depth == 0:
                    cand = text[s:i+1]
                    try:
                        return json.loads(cand)
                    except ValueError:
                        break
    raise ValueError("No valid JSON found in output")
