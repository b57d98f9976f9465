from urllib.parse import quote, urlencode

from .models import ProfileDescriptor

SCHEME = "vless"

# characters encodeURIComponent leaves alone, besides the unreserved set
_FRAGMENT_SAFE = "!*'()"


def build_vless(profile: ProfileDescriptor) -> str:
    params = []
    if profile.tls:
        params.append(("security", "tls"))
    params.append(("type", "ws"))
    params.append(("path", profile.path))
    params.append(("encryption", "none"))
    query = urlencode(params)
    label = quote(f"{profile.name}-{profile.uuid[:6]}", safe=_FRAGMENT_SAFE)
    return f"{SCHEME}://{profile.uuid}@{profile.host}:{profile.port}?{query}#{label}"
