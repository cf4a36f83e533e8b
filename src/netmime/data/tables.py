from __future__ import annotations

"""Hard-coded extension <-> type tables.

Resolution follows the same ordering Mozilla uses:
    1. ``PRIMARY_MAPPINGS`` are checked first and can never be overridden.
    2. The platform registry is asked next (when allowed).
    3. ``SECONDARY_MAPPINGS`` catch types we can deduce but that the OS may
       legitimately override.

Within each table the first entry listing an extension wins. The same
extension may appear under different types across tables (``png`` is both
``image/png`` and ``image/x-png``).

The standard type groups drive reverse lookups for ``image/*``, ``audio/*``
and ``video/*``. They come from http://www.w3schools.com/media/media_mimeref.asp
and http://plugindoc.mozdev.org/winmime.php.
"""

from netmime.core.models import MimeMapping, MimeTables, StandardTypeGroup

PRIMARY_MAPPINGS: tuple[MimeMapping, ...] = (
    MimeMapping('text/html', 'html,htm,shtml,shtm'),
    MimeMapping('text/css', 'css'),
    MimeMapping('text/xml', 'xml'),
    MimeMapping('image/gif', 'gif'),
    MimeMapping('image/jpeg', 'jpeg,jpg'),
    MimeMapping('image/webp', 'webp'),
    MimeMapping('image/png', 'png'),
    MimeMapping('video/mp4', 'mp4,m4v'),
    MimeMapping('audio/x-m4a', 'm4a'),
    MimeMapping('audio/mp3', 'mp3'),
    MimeMapping('video/ogg', 'ogv,ogm'),
    MimeMapping('audio/ogg', 'ogg,oga,opus'),
    MimeMapping('video/webm', 'webm'),
    MimeMapping('audio/webm', 'webm'),
    MimeMapping('audio/wav', 'wav'),
    MimeMapping('application/xhtml+xml', 'xhtml,xht,xhtm'),
    MimeMapping('application/x-chrome-extension', 'crx'),
    MimeMapping('multipart/related', 'mhtml,mht'),
)

SECONDARY_MAPPINGS: tuple[MimeMapping, ...] = (
    MimeMapping('application/octet-stream', 'exe,com,bin'),
    MimeMapping('application/gzip', 'gz'),
    MimeMapping('application/pdf', 'pdf'),
    MimeMapping('application/postscript', 'ps,eps,ai'),
    MimeMapping('application/javascript', 'js'),
    MimeMapping('application/font-woff', 'woff'),
    MimeMapping('image/bmp', 'bmp'),
    MimeMapping('image/x-icon', 'ico'),
    MimeMapping('image/vnd.microsoft.icon', 'ico'),
    MimeMapping('image/jpeg', 'jfif,pjpeg,pjp'),
    MimeMapping('image/tiff', 'tiff,tif'),
    MimeMapping('image/x-xbitmap', 'xbm'),
    MimeMapping('image/svg+xml', 'svg,svgz'),
    MimeMapping('image/x-png', 'png'),
    MimeMapping('message/rfc822', 'eml'),
    MimeMapping('text/plain', 'txt,text'),
    MimeMapping('text/html', 'ehtml'),
    MimeMapping('application/rss+xml', 'rss'),
    MimeMapping('application/rdf+xml', 'rdf'),
    MimeMapping('text/xml', 'xsl,xbl,xslt'),
    MimeMapping('application/vnd.mozilla.xul+xml', 'xul'),
    MimeMapping('application/x-shockwave-flash', 'swf,swl'),
    MimeMapping('application/pkcs7-mime', 'p7m,p7c,p7z'),
    MimeMapping('application/pkcs7-signature', 'p7s'),
    MimeMapping('application/x-mpegurl', 'm3u8'),
    MimeMapping('application/epub+zip', 'epub'),
)

STANDARD_IMAGE_TYPES: tuple[str, ...] = (
    'image/bmp',
    'image/cis-cod',
    'image/gif',
    'image/ief',
    'image/jpeg',
    'image/webp',
    'image/pict',
    'image/pipeg',
    'image/png',
    'image/svg+xml',
    'image/tiff',
    'image/vnd.microsoft.icon',
    'image/x-cmu-raster',
    'image/x-cmx',
    'image/x-icon',
    'image/x-portable-anymap',
    'image/x-portable-bitmap',
    'image/x-portable-graymap',
    'image/x-portable-pixmap',
    'image/x-rgb',
    'image/x-xbitmap',
    'image/x-xpixmap',
    'image/x-xwindowdump',
)

STANDARD_AUDIO_TYPES: tuple[str, ...] = (
    'audio/aac',
    'audio/aiff',
    'audio/amr',
    'audio/basic',
    'audio/midi',
    'audio/mp3',
    'audio/mp4',
    'audio/mpeg',
    'audio/mpeg3',
    'audio/ogg',
    'audio/vorbis',
    'audio/wav',
    'audio/webm',
    'audio/x-m4a',
    'audio/x-ms-wma',
    'audio/vnd.rn-realaudio',
    'audio/vnd.wave',
)

STANDARD_VIDEO_TYPES: tuple[str, ...] = (
    'video/avi',
    'video/divx',
    'video/flc',
    'video/mp4',
    'video/mpeg',
    'video/ogg',
    'video/quicktime',
    'video/sd-video',
    'video/webm',
    'video/x-dv',
    'video/x-m4v',
    'video/x-mpeg',
    'video/x-ms-asf',
    'video/x-ms-wmv',
)

STANDARD_TYPE_GROUPS: tuple[StandardTypeGroup, ...] = (
    StandardTypeGroup('image/', STANDARD_IMAGE_TYPES),
    StandardTypeGroup('audio/', STANDARD_AUDIO_TYPES),
    StandardTypeGroup('video/', STANDARD_VIDEO_TYPES),
)

# Used for any other ``type/*``: no platform members, hard-coded tables only.
DEFAULT_TYPE_GROUP: StandardTypeGroup = StandardTypeGroup(None, ())

DEFAULT_TABLES: MimeTables = MimeTables(
    primary=PRIMARY_MAPPINGS,
    secondary=SECONDARY_MAPPINGS,
    standard_groups=STANDARD_TYPE_GROUPS,
    default_group=DEFAULT_TYPE_GROUP,
)
