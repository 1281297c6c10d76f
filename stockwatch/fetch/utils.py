def short_url(url: str) -> str:
    """
    Strip tracking noise from a product URL for sharing.
    Examples: 'https://a.co/d/XYZ/ref=abc?tag=1' -> 'https://a.co/d/XYZ'
    """
    idx = url.find("/ref=")
    if idx != -1:
        url = url[:idx]

    idx = url.find("?")
    if idx != -1:
        url = url[:idx]

    return url
