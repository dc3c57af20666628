"""Literal HTML attribute entries.

Scoped attributes name the elements they apply to; names are resolved against
:data:`~html_index.data.elements.ELEMENTS_BY_NAME`, so every element exists
before any attribute refers to it. Attributes without elements are global.
"""

from __future__ import annotations

from ..models import AttributeEntry, CatalogError, ElementEntry
from .elements import ELEMENTS_BY_NAME


def _scoped(*names: str) -> tuple[ElementEntry, ...]:
    """Resolve element names into the element entries they refer to."""
    try:
        return tuple(ELEMENTS_BY_NAME[name] for name in names)
    except KeyError as exc:
        msg = f"Attribute refers to unknown element {exc.args[0]!r}."
        raise CatalogError(msg) from exc


ATTRIBUTE_ACCEPT = AttributeEntry(
    "accept",
    "List of types the server accepts, typically a file type.",
    elements=_scoped("form", "input"),
)

ATTRIBUTE_ACCEPT_CHARSET = AttributeEntry(
    "accept-charset",
    "List of supported charsets.",
    elements=_scoped("form"),
)

ATTRIBUTE_ACCESSKEY = AttributeEntry(
    "accesskey",
    "Defines a keyboard shortcut to activate or add focus to the element.",
)

ATTRIBUTE_ACTION = AttributeEntry(
    "action",
    "The URI of a program that processes the information submitted via the "
    "form.",
    elements=_scoped("form"),
)

ATTRIBUTE_ALIGN = AttributeEntry(
    "align",
    "Specifies the horizontal alignment of the element.",
    elements=_scoped(
        "applet",
        "caption",
        "col",
        "colgroup",
        "hr",
        "iframe",
        "img",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
    ),
)

ATTRIBUTE_ALT = AttributeEntry(
    "alt",
    "Alternative text in case an image can't be displayed.",
    elements=_scoped("applet", "area", "img", "input"),
)

ATTRIBUTE_ASYNC = AttributeEntry(
    "async",
    "Indicates that the script should be executed asynchronously.",
    elements=_scoped("script"),
)

ATTRIBUTE_AUTOCAPITALIZE = AttributeEntry(
    "autocapitalize",
    "Controls whether and how text input is automatically capitalized as it is "
    "entered/edited by the user.",
)

ATTRIBUTE_AUTOCOMPLETE = AttributeEntry(
    "autocomplete",
    "Indicates whether controls in this form can by default have their values "
    "automatically completed by the browser.",
    elements=_scoped("form", "input", "textarea"),
)

ATTRIBUTE_AUTOFOCUS = AttributeEntry(
    "autofocus",
    "The element should be automatically focused after the page loaded.",
    elements=_scoped("button", "input", "select", "textarea"),
)

ATTRIBUTE_AUTOPLAY = AttributeEntry(
    "autoplay",
    "The audio or video should play as soon as possible.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_BGCOLOR = AttributeEntry(
    "bgcolor",
    "Background color of the element.\n"
    "Note: This is a legacy attribute.\n"
    "Please use the CSS background-color property instead.",
    elements=_scoped(
        "body",
        "col",
        "colgroup",
        "table",
        "tbody",
        "tfoot",
        "td",
        "th",
        "tr",
    ),
)

ATTRIBUTE_BORDER = AttributeEntry(
    "border",
    "The border width.\n"
    "Note: This is a legacy attribute.\n"
    "Please use the CSS border property instead.",
    elements=_scoped("img", "object", "table"),
)

ATTRIBUTE_BUFFERED = AttributeEntry(
    "buffered",
    "Contains the time range of already buffered media.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_CHARSET = AttributeEntry(
    "charset",
    "Declares the character encoding of the page or script.",
    elements=_scoped("meta", "script"),
)

ATTRIBUTE_CHECKED = AttributeEntry(
    "checked",
    "Indicates whether the element should be checked on page load.",
    elements=_scoped("input"),
)

ATTRIBUTE_CITE = AttributeEntry(
    "cite",
    "Contains a URI which points to the source of the quote or change.",
    elements=_scoped("blockquote", "del", "ins", "q"),
)

ATTRIBUTE_CLASS = AttributeEntry(
    "class",
    "Often used with CSS to style elements with common properties.",
)

ATTRIBUTE_CODE = AttributeEntry(
    "code",
    "Specifies the URL of the applet's class file to be loaded and executed.",
    elements=_scoped("applet"),
)

ATTRIBUTE_CODEBASE = AttributeEntry(
    "codebase",
    "This attribute gives the absolute or relative URL of the directory where "
    "applets' .class files referenced by the code attribute are stored.",
    elements=_scoped("applet"),
)

ATTRIBUTE_COLOR = AttributeEntry(
    "color",
    "This attribute sets the text color using either a named color or a color "
    "specified in the hexadecimal #RRGGBB format.\n"
    "Note: This is a legacy attribute.\n"
    "Please use the CSS color property instead.",
    deprecated=True,
    elements=_scoped("hr"),
)

ATTRIBUTE_COLS = AttributeEntry(
    "cols",
    "Defines the number of columns in a textarea.",
    elements=_scoped("textarea"),
)

ATTRIBUTE_COLSPAN = AttributeEntry(
    "colspan",
    "The colspan attribute defines the number of columns a cell should span.",
    elements=_scoped("td", "th"),
)

ATTRIBUTE_CONTENT = AttributeEntry(
    "content",
    "A value associated with http-equiv or name depending on the context.",
    elements=_scoped("meta"),
)

ATTRIBUTE_CONTENTEDITABLE = AttributeEntry(
    "contenteditable",
    "Indicates whether the element's content is editable.",
)

ATTRIBUTE_CONTEXTMENU = AttributeEntry(
    "contextmenu",
    "Defines the ID of a <menu> element which will serve as the element's "
    "context menu.",
)

ATTRIBUTE_CONTROLS = AttributeEntry(
    "controls",
    "Indicates whether the browser should show playback controls to the user.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_COORDS = AttributeEntry(
    "coords",
    "A set of values specifying the coordinates of the hot-spot region.",
    elements=_scoped("area"),
)

ATTRIBUTE_CROSSORIGIN = AttributeEntry(
    "crossorigin",
    "How the element handles cross-origin requests",
    elements=_scoped("audio", "img", "link", "script", "video"),
)

ATTRIBUTE_DATA = AttributeEntry(
    "data",
    "Specifies the URL of the resource.",
    elements=_scoped("object"),
)

ATTRIBUTE_DATETIME = AttributeEntry(
    "datetime",
    "Indicates the date and time associated with the element.",
    elements=_scoped("del", "ins", "time"),
)

ATTRIBUTE_DEFER = AttributeEntry(
    "defer",
    "Indicates that the script should be executed after the page has been "
    "parsed.",
    elements=_scoped("script"),
)

ATTRIBUTE_DIR = AttributeEntry(
    "dir",
    "Defines the text direction.\n"
    "Allowed values are ltr (Left-To-Right) or rtl (Right-To-Left)",
)

ATTRIBUTE_DIRNAME = AttributeEntry(
    "dirname",
    None,
    elements=_scoped("input", "textarea"),
)

ATTRIBUTE_DISABLED = AttributeEntry(
    "disabled",
    "Indicates whether the user can interact with the element.",
    elements=_scoped(
        "button",
        "fieldset",
        "input",
        "optgroup",
        "option",
        "select",
        "textarea",
    ),
)

ATTRIBUTE_DOWNLOAD = AttributeEntry(
    "download",
    "Indicates that the hyperlink is to be used for downloading a resource.",
    elements=_scoped("a", "area"),
)

ATTRIBUTE_DRAGGABLE = AttributeEntry(
    "draggable",
    "Defines whether the element can be dragged.",
)

ATTRIBUTE_DROPZONE = AttributeEntry(
    "dropzone",
    "Indicates that the element accept the dropping of content on it.",
)

ATTRIBUTE_ENCTYPE = AttributeEntry(
    "enctype",
    "Defines the content type of the form date when the method is POST.",
    elements=_scoped("form"),
)

ATTRIBUTE_FOR = AttributeEntry(
    "for",
    "Describes elements which belongs to this one.",
    elements=_scoped("label", "output"),
)

ATTRIBUTE_FORM = AttributeEntry(
    "form",
    "Indicates the form that is the owner of the element.",
    elements=_scoped(
        "button",
        "fieldset",
        "input",
        "label",
        "meter",
        "object",
        "output",
        "progress",
        "select",
        "textarea",
    ),
)

ATTRIBUTE_FORMACTION = AttributeEntry(
    "formaction",
    "Indicates the action of the element, overriding the action defined in the "
    "<form>.",
    elements=_scoped("input", "button"),
)

ATTRIBUTE_HEADERS = AttributeEntry(
    "headers",
    "IDs of the <th> elements which applies to this element.",
    elements=_scoped("td", "th"),
)

ATTRIBUTE_HEIGHT = AttributeEntry(
    "height",
    "Specifies the height of the element.\n"
    "Note: In some instances, such as <div>, this is a legacy attribute, in "
    "which case the CSS height property should be used instead.",
    elements=_scoped("canvas", "embed", "iframe", "img", "input", "object", "video"),
)

ATTRIBUTE_HIDDEN = AttributeEntry(
    "hidden",
    "Prevents rendering of given element, while keeping child elements, e.g. "
    "script elements, active.",
)

ATTRIBUTE_HIGH = AttributeEntry(
    "high",
    "Indicates the lower bound of the upper range.",
    elements=_scoped("meter"),
)

ATTRIBUTE_HREF = AttributeEntry(
    "href",
    "The URL of a linked resource.",
    elements=_scoped("a", "area", "link"),
)

ATTRIBUTE_HREFLANG = AttributeEntry(
    "hreflang",
    "Specifies the language of the linked resource",
    elements=_scoped("a", "area", "link"),
)

ATTRIBUTE_HTTP_EQUIV = AttributeEntry(
    "http-equiv",
    None,
    elements=_scoped("meta"),
)

ATTRIBUTE_ID = AttributeEntry(
    "id",
    "Often used with CSS to style a specific element.\n"
    "The value of this attribute must be unique.",
)

ATTRIBUTE_INTEGRITY = AttributeEntry(
    "integrity",
    "Security Feature that allows browsers to verify what they fetch.",
    elements=_scoped("link", "script"),
)

ATTRIBUTE_ISMAP = AttributeEntry(
    "ismap",
    "Indicates that the image is part of a server-side image map.",
    elements=_scoped("img"),
)

ATTRIBUTE_ITEMPROP = AttributeEntry(
    "itemprop",
    None,
)

ATTRIBUTE_LANG = AttributeEntry(
    "lang",
    "Defines the language used in the element.",
)

ATTRIBUTE_LANGUAGE = AttributeEntry(
    "language",
    "Defines the script language used in the element.",
    elements=_scoped("script"),
)

ATTRIBUTE_LIST = AttributeEntry(
    "list",
    "Identifies a list of pre-defined options to suggest to the user.",
    elements=_scoped("input"),
)

ATTRIBUTE_LOOP = AttributeEntry(
    "loop",
    "Indicates whether the media should start playing from the start when it's "
    "finished.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_LOW = AttributeEntry(
    "low",
    "Indicates the upper bound of the lower range.",
    elements=_scoped("meter"),
)

ATTRIBUTE_MANIFEST = AttributeEntry(
    "manifest",
    "Specifies the URL of the document's cache manifest.",
    elements=_scoped("html"),
)

ATTRIBUTE_MAX = AttributeEntry(
    "max",
    "Indicates the maximum value allowed.",
    elements=_scoped("input", "meter", "progress"),
)

ATTRIBUTE_MAXLENGTH = AttributeEntry(
    "maxlength",
    "Defines the maximum number of characters allowed in the element.",
    elements=_scoped("input", "textarea"),
)

ATTRIBUTE_MINLENGTH = AttributeEntry(
    "minlength",
    "Defines the minimum number of characters allowed in the element.",
    elements=_scoped("input", "textarea"),
)

ATTRIBUTE_MEDIA = AttributeEntry(
    "media",
    "Specifies a hint of the media for which the linked resource was designed.",
    elements=_scoped("a", "area", "link", "source", "style"),
)

ATTRIBUTE_METHOD = AttributeEntry(
    "method",
    "Defines which HTTP method to use when submitting the form.\n"
    "Can be GET (default) or POST.",
    elements=_scoped("form"),
)

ATTRIBUTE_MIN = AttributeEntry(
    "min",
    "Indicates the minimum value allowed.",
    elements=_scoped("input", "meter"),
)

ATTRIBUTE_MULTIPLE = AttributeEntry(
    "multiple",
    "Indicates whether multiple values can be entered in an input of the type "
    "email or file.",
    elements=_scoped("input", "select"),
)

ATTRIBUTE_MUTED = AttributeEntry(
    "muted",
    "Indicates whether the audio will be initially silenced on page load.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_NAME = AttributeEntry(
    "name",
    "Name of the element.\n"
    "For example used by the server to identify the fields in form submits.",
    elements=_scoped(
        "button",
        "form",
        "fieldset",
        "iframe",
        "input",
        "object",
        "output",
        "select",
        "textarea",
        "map",
        "meta",
        "param",
    ),
)

ATTRIBUTE_NOVALIDATE = AttributeEntry(
    "novalidate",
    "This attribute indicates that the form shouldn't be validated when "
    "submitted.",
    elements=_scoped("form"),
)

ATTRIBUTE_OPEN = AttributeEntry(
    "open",
    "Indicates whether the details will be shown on page load.",
    elements=_scoped("details"),
)

ATTRIBUTE_OPTIMUM = AttributeEntry(
    "optimum",
    "Indicates the optimal numeric value.",
    elements=_scoped("meter"),
)

ATTRIBUTE_PATTERN = AttributeEntry(
    "pattern",
    "Defines a regular expression which the element's value will be validated "
    "against.",
    elements=_scoped("input"),
)

ATTRIBUTE_PING = AttributeEntry(
    "ping",
    None,
    elements=_scoped("a", "area"),
)

ATTRIBUTE_PLACEHOLDER = AttributeEntry(
    "placeholder",
    "Provides a hint to the user of what can be entered in the field.",
    elements=_scoped("input", "textarea"),
)

ATTRIBUTE_POSTER = AttributeEntry(
    "poster",
    "A URL indicating a poster frame to show until the user plays or seeks.",
    elements=_scoped("video"),
)

ATTRIBUTE_PRELOAD = AttributeEntry(
    "preload",
    "Indicates whether the whole resource, parts of it or nothing should be "
    "preloaded.",
    elements=_scoped("audio", "video"),
)

ATTRIBUTE_READONLY = AttributeEntry(
    "readonly",
    "Indicates whether the element can be edited.",
    elements=_scoped("input", "textarea"),
)

ATTRIBUTE_REL = AttributeEntry(
    "rel",
    "Specifies the relationship of the target object to the link object.",
    elements=_scoped("a", "area", "link"),
)

ATTRIBUTE_REQUIRED = AttributeEntry(
    "required",
    "Indicates whether this element is required to fill out or not.",
    elements=_scoped("input", "select", "textarea"),
)

ATTRIBUTE_REVERSED = AttributeEntry(
    "reversed",
    "Indicates whether the list should be displayed in a descending order "
    "instead of a ascending.",
    elements=_scoped("ol"),
)

ATTRIBUTE_ROWS = AttributeEntry(
    "rows",
    "Defines the number of rows in a text area.",
    elements=_scoped("textarea"),
)

ATTRIBUTE_ROWSPAN = AttributeEntry(
    "rowspan",
    "Defines the number of rows a table cell should span over.",
    elements=_scoped("td", "th"),
)

ATTRIBUTE_SANDBOX = AttributeEntry(
    "sandbox",
    "Stops a document loaded in an iframe from using certain features (such as "
    "submitting forms or opening new windows).",
    elements=_scoped("iframe"),
)

ATTRIBUTE_SCOPE = AttributeEntry(
    "scope",
    "Defines the cells that the header test (defined in the th element) "
    "relates to.",
    elements=_scoped("th"),
)

ATTRIBUTE_SCOPED = AttributeEntry(
    "scoped",
    None,
    elements=_scoped("style"),
)

ATTRIBUTE_SELECTED = AttributeEntry(
    "selected",
    "Defines a value which will be selected on page load.",
    elements=_scoped("option"),
)

ATTRIBUTE_SHAPE = AttributeEntry(
    "shape",
    None,
    elements=_scoped("a", "area"),
)

ATTRIBUTE_SIZE = AttributeEntry(
    "size",
    "Defines the width of the element (in pixels).\n"
    "If the element's type attribute is text or password then it's the number "
    "of characters.",
    elements=_scoped("input", "select"),
)

ATTRIBUTE_SIZES = AttributeEntry(
    "sizes",
    None,
    elements=_scoped("link", "img", "source"),
)

ATTRIBUTE_SLOT = AttributeEntry(
    "slot",
    "Assigns a slot in a shadow DOM shadow tree to an element.",
)

ATTRIBUTE_SPAN = AttributeEntry(
    "span",
    None,
    elements=_scoped("col", "colgroup"),
)

ATTRIBUTE_SPELLCHECK = AttributeEntry(
    "spellcheck",
    "Indicates whether spell checking is allowed for the element.",
)

ATTRIBUTE_SRC = AttributeEntry(
    "src",
    "The URL of the embeddable content.",
    elements=_scoped(
        "audio",
        "embed",
        "iframe",
        "img",
        "input",
        "script",
        "source",
        "video",
    ),
)

ATTRIBUTE_SRCDOC = AttributeEntry(
    "srcdoc",
    None,
    elements=_scoped("iframe"),
)

ATTRIBUTE_SRCSET = AttributeEntry(
    "srcset",
    None,
    elements=_scoped("img"),
)

ATTRIBUTE_START = AttributeEntry(
    "start",
    "Defines the first number if other than 1.",
    elements=_scoped("ol"),
)

ATTRIBUTE_STEP = AttributeEntry(
    "step",
    None,
    elements=_scoped("input"),
)

ATTRIBUTE_STYLE = AttributeEntry(
    "style",
    "Defines CSS styles which will override styles previously set.",
)

ATTRIBUTE_SUMMARY = AttributeEntry(
    "summary",
    None,
    elements=_scoped("table"),
)

ATTRIBUTE_TABINDEX = AttributeEntry(
    "tabindex",
    "Overrides the browser's default tab order and follows the one specified "
    "instead.",
)

ATTRIBUTE_TARGET = AttributeEntry(
    "target",
    None,
    elements=_scoped("a", "area", "form"),
)

ATTRIBUTE_TITLE = AttributeEntry(
    "title",
    "Text to be displayed in a tooltip when hovering over the element.",
)

ATTRIBUTE_TRANSLATE = AttributeEntry(
    "translate",
    "Specify whether an element’s attribute values and the values of its "
    "Text node children are to be translated when the page is localized, or "
    "whether to leave them unchanged.",
)

ATTRIBUTE_TYPE = AttributeEntry(
    "type",
    "Defines the type of the element.",
    elements=_scoped(
        "button",
        "input",
        "embed",
        "object",
        "script",
        "source",
        "style",
        "menu",
    ),
)

ATTRIBUTE_USEMAP = AttributeEntry(
    "usemap",
    None,
    elements=_scoped("img", "input", "object"),
)

ATTRIBUTE_VALUE = AttributeEntry(
    "value",
    "Defines a default value which will be displayed in the element on page "
    "load.",
    elements=_scoped(
        "button",
        "option",
        "input",
        "li",
        "meter",
        "progress",
        "param",
    ),
)

ATTRIBUTE_WIDTH = AttributeEntry(
    "width",
    "Establishes the element's width.",
    elements=_scoped("canvas", "embed", "iframe", "img", "input", "object", "video"),
)

ATTRIBUTE_WRAP = AttributeEntry(
    "wrap",
    "Indicates whether the text should be wrapped.",
    elements=_scoped("textarea"),
)

HTML_ATTRIBUTES: tuple[AttributeEntry, ...] = (
    ATTRIBUTE_ACCEPT,
    ATTRIBUTE_ACCEPT_CHARSET,
    ATTRIBUTE_ACCESSKEY,
    ATTRIBUTE_ACTION,
    ATTRIBUTE_ALIGN,
    ATTRIBUTE_ALT,
    ATTRIBUTE_ASYNC,
    ATTRIBUTE_AUTOCAPITALIZE,
    ATTRIBUTE_AUTOCOMPLETE,
    ATTRIBUTE_AUTOFOCUS,
    ATTRIBUTE_AUTOPLAY,
    ATTRIBUTE_BGCOLOR,
    ATTRIBUTE_BORDER,
    ATTRIBUTE_BUFFERED,
    ATTRIBUTE_CHARSET,
    ATTRIBUTE_CHECKED,
    ATTRIBUTE_CITE,
    ATTRIBUTE_CLASS,
    ATTRIBUTE_CODE,
    ATTRIBUTE_CODEBASE,
    ATTRIBUTE_COLOR,
    ATTRIBUTE_COLS,
    ATTRIBUTE_COLSPAN,
    ATTRIBUTE_CONTENT,
    ATTRIBUTE_CONTENTEDITABLE,
    ATTRIBUTE_CONTEXTMENU,
    ATTRIBUTE_CONTROLS,
    ATTRIBUTE_COORDS,
    ATTRIBUTE_CROSSORIGIN,
    ATTRIBUTE_DATA,
    ATTRIBUTE_DATETIME,
    ATTRIBUTE_DEFER,
    ATTRIBUTE_DIR,
    ATTRIBUTE_DIRNAME,
    ATTRIBUTE_DISABLED,
    ATTRIBUTE_DOWNLOAD,
    ATTRIBUTE_DRAGGABLE,
    ATTRIBUTE_DROPZONE,
    ATTRIBUTE_ENCTYPE,
    ATTRIBUTE_FOR,
    ATTRIBUTE_FORM,
    ATTRIBUTE_FORMACTION,
    ATTRIBUTE_HEADERS,
    ATTRIBUTE_HEIGHT,
    ATTRIBUTE_HIDDEN,
    ATTRIBUTE_HIGH,
    ATTRIBUTE_HREF,
    ATTRIBUTE_HREFLANG,
    ATTRIBUTE_HTTP_EQUIV,
    ATTRIBUTE_ID,
    ATTRIBUTE_INTEGRITY,
    ATTRIBUTE_ISMAP,
    ATTRIBUTE_ITEMPROP,
    ATTRIBUTE_LANG,
    ATTRIBUTE_LANGUAGE,
    ATTRIBUTE_LIST,
    ATTRIBUTE_LOOP,
    ATTRIBUTE_LOW,
    ATTRIBUTE_MANIFEST,
    ATTRIBUTE_MAX,
    ATTRIBUTE_MAXLENGTH,
    ATTRIBUTE_MINLENGTH,
    ATTRIBUTE_MEDIA,
    ATTRIBUTE_METHOD,
    ATTRIBUTE_MIN,
    ATTRIBUTE_MULTIPLE,
    ATTRIBUTE_MUTED,
    ATTRIBUTE_NAME,
    ATTRIBUTE_NOVALIDATE,
    ATTRIBUTE_OPEN,
    ATTRIBUTE_OPTIMUM,
    ATTRIBUTE_PATTERN,
    ATTRIBUTE_PING,
    ATTRIBUTE_PLACEHOLDER,
    ATTRIBUTE_POSTER,
    ATTRIBUTE_PRELOAD,
    ATTRIBUTE_READONLY,
    ATTRIBUTE_REL,
    ATTRIBUTE_REQUIRED,
    ATTRIBUTE_REVERSED,
    ATTRIBUTE_ROWS,
    ATTRIBUTE_ROWSPAN,
    ATTRIBUTE_SANDBOX,
    ATTRIBUTE_SCOPE,
    ATTRIBUTE_SCOPED,
    ATTRIBUTE_SELECTED,
    ATTRIBUTE_SHAPE,
    ATTRIBUTE_SIZE,
    ATTRIBUTE_SIZES,
    ATTRIBUTE_SLOT,
    ATTRIBUTE_SPAN,
    ATTRIBUTE_SPELLCHECK,
    ATTRIBUTE_SRC,
    ATTRIBUTE_SRCDOC,
    ATTRIBUTE_SRCSET,
    ATTRIBUTE_START,
    ATTRIBUTE_STEP,
    ATTRIBUTE_STYLE,
    ATTRIBUTE_SUMMARY,
    ATTRIBUTE_TABINDEX,
    ATTRIBUTE_TARGET,
    ATTRIBUTE_TITLE,
    ATTRIBUTE_TRANSLATE,
    ATTRIBUTE_TYPE,
    ATTRIBUTE_USEMAP,
    ATTRIBUTE_VALUE,
    ATTRIBUTE_WIDTH,
    ATTRIBUTE_WRAP,
)
