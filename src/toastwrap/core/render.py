"""Render notifications into toast XML and the PowerShell that shows it.

Templates are plain module-level strings filled with ``str.format``; they are
built once at import and only ever read.
"""

import re
from xml.sax.saxutils import escape

from toastwrap.core.enums import Audio, Duration
from toastwrap.core.errors import RenderError
from toastwrap.core.model import DEFAULT_ACTIVATION_TYPE, Notification

TOAST_APP_ID = "Windows App"
REGISTER_APP_ID = "com.windows.app"
REGISTER_DISPLAY_NAME = "Windows App"

# Anything outside the XML 1.0 Char production
_INVALID_XML = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
# PowerShell treats these the same as an ASCII single quote
_PS_QUOTES = re.compile("(['\u2018\u2019\u201a\u201b])")
# Quotes are escaped too: attributes use double quotes and the whole document
# sits in a single-quoted PowerShell here-string.
_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
    "\u2018": "&#8216;",
    "\u2019": "&#8217;",
    "\u201a": "&#8218;",
    "\u201b": "&#8219;",
}

_TOAST_XML = """\
<toast activationType="{activation_type}" launch="{launch}" duration="{duration}">
  <visual>
    <binding template="ToastGeneric">
{visual}    </binding>
  </visual>
{audio}{actions}</toast>
"""

_IMAGE_XML = '      <image placement="appLogoOverride" src="{src}" />\n'
_TEXT_XML = "      <text>{text}</text>\n"
_SILENT_XML = '  <audio silent="true" />\n'
_AUDIO_XML = '  <audio src="{src}" loop="{loop}" />\n'
_ACTIONS_XML = "  <actions>\n{items}  </actions>\n"
_ACTION_XML = (
    '    <action activationType="{activation_type}" content="{content}"'
    ' arguments="{arguments}" />\n'
)

_TOAST_SCRIPT = """\
[Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null
[Windows.UI.Notifications.ToastNotification, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null
[Windows.Data.Xml.Dom.XmlDocument, Windows.Data.Xml.Dom.XmlDocument, ContentType = WindowsRuntime] | Out-Null

$APP_ID = {app_id}

$template = @'
{markup}'@

$xml = New-Object Windows.Data.Xml.Dom.XmlDocument
$xml.LoadXml($template)
$toast = New-Object Windows.UI.Notifications.ToastNotification $xml
[Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier($APP_ID).Show($toast)
"""

_REGISTER_SCRIPT = """\
$AppID = {app_id}
$AppDisplayName = {display_name}
$LogoImagePath = {icon}

$regPathToastNotificationSettings = 'HKCU:\\Software\\Microsoft\\Windows\\CurrentVersion\\Notifications\\Settings'
$regPathToastApp = 'HKCU:\\Software\\Classes\\AppUserModelId'

New-Item -Path "$regPathToastNotificationSettings\\$AppID" -Force | Out-Null
Set-ItemProperty -Path "$regPathToastNotificationSettings\\$AppID" -Name 'ShowInActionCenter' -Value 1 -Force
Set-ItemProperty -Path "$regPathToastNotificationSettings\\$AppID" -Name 'Enabled' -Value 1 -Force

New-Item -Path "$regPathToastApp\\$AppID" -Force | Out-Null
Set-ItemProperty -Path "$regPathToastApp\\$AppID" -Name 'DisplayName' -Value $AppDisplayName -Force
Set-ItemProperty -Path "$regPathToastApp\\$AppID" -Name 'IconUri' -Value $LogoImagePath -Force
"""


def _xml(value: object, name: str) -> str:
    """Escape a field for use as XML text or attribute content."""
    if not isinstance(value, str):
        raise RenderError(f"{name} must be a string, got {type(value).__name__}")
    bad = _INVALID_XML.search(value)
    if bad:
        raise RenderError(f"{name} contains a character not allowed in XML: {bad.group()!r}")
    return escape(value, _ENTITIES)


def _ps_literal(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + _PS_QUOTES.sub(r"\1\1", value) + "'"


def _member(value: object, enum: type, default: object, name: str):
    """Return ``value`` as an enum member, ``default`` when unset."""
    if value is None:
        return default
    if not isinstance(value, enum):
        raise RenderError(f"{name} must be a {enum.__name__} member, got {value!r}")
    return value


def _audio_xml(notification: Notification) -> str:
    audio = _member(notification.audio, Audio, Audio.DEFAULT, "audio")
    if audio is Audio.SILENT:
        return _SILENT_XML
    loop = "true" if notification.loop else "false"
    return _AUDIO_XML.format(src=_xml(audio.value, "audio"), loop=loop)


def _actions_xml(notification: Notification) -> str:
    if not notification.actions:
        return ""
    items = "".join(
        _ACTION_XML.format(
            activation_type=_xml(action.action_type, "action type"),
            content=_xml(action.label, "action label"),
            arguments=_xml(action.arguments, "action arguments"),
        )
        for action in notification.actions
    )
    return _ACTIONS_XML.format(items=items)


def render(notification: Notification) -> str:
    """Render the ``<toast>`` XML document for a notification.

    Empty icon, title and message produce no element at all, and neither
    does an empty action list. Unset activation type and duration render as
    ``protocol`` and ``Short``; unset audio renders as the default sound.

    Raises:
        RenderError: A text field is not a string or holds characters XML
            cannot represent, or audio/duration is not an enum member.
    """
    visual = ""
    if notification.icon:
        visual += _IMAGE_XML.format(src=_xml(notification.icon, "icon"))
    if notification.title:
        visual += _TEXT_XML.format(text=_xml(notification.title, "title"))
    if notification.message:
        visual += _TEXT_XML.format(text=_xml(notification.message, "message"))

    duration = _member(notification.duration, Duration, Duration.SHORT, "duration")
    return _TOAST_XML.format(
        activation_type=_xml(
            notification.activation_type or DEFAULT_ACTIVATION_TYPE, "activation type"
        ),
        launch=_xml(notification.activation_arguments, "activation arguments"),
        duration=duration.value,
        visual=visual,
        audio=_audio_xml(notification),
        actions=_actions_xml(notification),
    )


def render_script(notification: Notification) -> str:
    """Render the PowerShell script that displays ``notification``."""
    markup = render(notification)
    return _TOAST_SCRIPT.format(
        app_id=_ps_literal(notification.app_id or TOAST_APP_ID),
        markup=markup,
    )


def render_registration(app_id: str, display_name: str, icon: str) -> str:
    """Render the script that registers an app identity for toasts."""
    return _REGISTER_SCRIPT.format(
        app_id=_ps_literal(app_id or REGISTER_APP_ID),
        display_name=_ps_literal(display_name or REGISTER_DISPLAY_NAME),
        icon=_ps_literal(icon),
    )
