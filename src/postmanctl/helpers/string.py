from typing import Optional


def stripped(val: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """
    Return val as a trimmed string; if val is None, use default; if the result
    is empty after trimming, return None.
    """
    s = default if val is None else val
    if s is None:
        return None
    s = str(s).strip()
    return s or None


def clean_path(*parts: str) -> str:
    """
    Join path segments with '/' and clean the result:
      - empty segments are skipped
      - duplicate slashes, '.' and '..' are collapsed
      - no trailing slash

    clean_path("collections", "abc") -> "collections/abc"
    clean_path("/a//b/", "../c")     -> "/a/c"
    clean_path()                     -> ""
    """
    joined = "/".join(p for p in parts if p)
    if not joined:
        return ""

    rooted = joined.startswith("/")
    out: list[str] = []
    for seg in joined.split("/"):
        if seg in ("", "."):
            continue
        if seg == "..":
            if out and out[-1] != "..":
                out.pop()
            elif not rooted:
                out.append(seg)
            continue
        out.append(seg)

    cleaned = "/".join(out)
    if rooted:
        return "/" + cleaned
    return cleaned or "."
