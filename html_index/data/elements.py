"""Literal HTML element entries, grouped by section of the HTML reference.

Element and attribute descriptions are derived from the MDN Web Docs HTML
reference (https://developer.mozilla.org/en-US/), licensed under CC-BY-SA 2.5,
and slightly modified.
"""

from __future__ import annotations

from ..models import ElementCategory, ElementEntry

# Main root

ELEMENT_HTML = ElementEntry(
    "html",
    "Represents the root (top-level element) of an HTML document, so it is "
    "also referred to as the root element. All other elements must be "
    "descendants of this element.",
    category=ElementCategory.MAIN_ROOT,
)

# Document metadata

ELEMENT_LINK = ElementEntry(
    "link",
    "Specifies relationships between the current document and an external "
    "resource. This element is most commonly used to link to stylesheets.",
    category=ElementCategory.DOCUMENT_METADATA,
)

ELEMENT_META = ElementEntry(
    "meta",
    "Represents metadata that cannot be represented by other HTML meta-related "
    "elements, like <base>, <link>, <script>, <style> or <title>.",
    category=ElementCategory.DOCUMENT_METADATA,
)

ELEMENT_STYLE = ElementEntry(
    "style",
    "Contains style information for a document, or part of a document.",
    category=ElementCategory.DOCUMENT_METADATA,
)

ELEMENT_TITLE = ElementEntry(
    "title",
    "Defines the document's title that is shown in a browser's title bar or a "
    "page's tab.",
    category=ElementCategory.DOCUMENT_METADATA,
)

# Sectioning root

ELEMENT_BODY = ElementEntry(
    "body",
    "Represents the content of an HTML document.\n"
    "There can be only one <body> element in a document.",
    category=ElementCategory.SECTIONING_ROOT,
)

# Content sectioning

ELEMENT_ADDRESS = ElementEntry(
    "address",
    "Indicates that the enclosed HTML provides contact information for a "
    "person or people, or for an organization.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_ARTICLE = ElementEntry(
    "article",
    "Represents a self-contained composition in a document, page, application, "
    "or site, which is intended to be independently distributable or reusable "
    "(e.g., in syndication).\n"
    "Examples include: a forum post, a magazine or newspaper article, or a "
    "blog entry.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_ASIDE = ElementEntry(
    "aside",
    "Represents a portion of a document whose content is only indirectly "
    "related to the document's main content.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_FOOTER = ElementEntry(
    "footer",
    "Represents a footer for its nearest sectioning content or sectioning root "
    "element.\n"
    "A footer typically contains information about the author of the section, "
    "copyright data or links to related documents.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_HEAD = ElementEntry(
    "head",
    "Provides general information (metadata) about the document, including its "
    "title and links to its scripts and style sheets.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_HEADER = ElementEntry(
    "header",
    "Represents introductory content, typically a group of introductory or "
    "navigational aids.\n"
    "It may contain some heading elements but also other elements like a logo, "
    "a search form, an author name, and so on.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H1 = ElementEntry(
    "h1",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H2 = ElementEntry(
    "h2",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H3 = ElementEntry(
    "h3",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H4 = ElementEntry(
    "h4",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H5 = ElementEntry(
    "h5",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_H6 = ElementEntry(
    "h6",
    "The HTML <h1>–<h6> elements represent six levels of section headings.\n"
    "<h1> is the highest section level and <h6> is the lowest.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_HGROUP = ElementEntry(
    "hgroup",
    "Represents a multi-level heading for a section of a document.\n"
    "It groups a set of <h1>–<h6> elements.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_NAV = ElementEntry(
    "nav",
    "Represents a section of a page whose purpose is to provide navigation "
    "links, either within the current document or to other documents.\n"
    "Common examples of navigation sections are menus, tables of contents, and "
    "indexes.",
    category=ElementCategory.CONTENT_SECTIONING,
)

ELEMENT_SECTION = ElementEntry(
    "section",
    "Represents a standalone section — which doesn't have a more specific "
    "semantic element to represent it — contained within an HTML document.",
    category=ElementCategory.CONTENT_SECTIONING,
)

# Text content

ELEMENT_BLOCKQUOTE = ElementEntry(
    "blockquote",
    "Indicates that the enclosed text is an extended quotation.\n"
    "Usually, this is rendered visually by indentation.\n"
    "A URL for the source of the quotation may be given using the cite "
    "attribute, while a text representation of the source can be given using "
    "the <cite> element.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_DD = ElementEntry(
    "dd",
    "Provides the details about or the definition of the preceding term (<dt>) "
    "in a description list (<dl>).",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_DIR = ElementEntry(
    "dir",
    "The obsolete HTML Directory element is used as a container for a directory "
    "of files and/or folders, potentially with styles and icons applied by the "
    "user agent.",
    category=ElementCategory.TEXT_CONTENT,
    deprecated=True,
)

ELEMENT_DIV = ElementEntry(
    "div",
    "The HTML Content Division element is the generic container for flow "
    "content.\n"
    "It has no effect on the content or layout until styled using CSS.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_DL = ElementEntry(
    "dl",
    "Represents a description list.\n"
    "The element encloses a list of groups of terms (specified using the <dt> "
    "element) and descriptions (provided by <dd> elements).\n"
    "Common uses for this element are to implement a glossary or to display "
    "metadata (a list of key-value pairs).",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_DT = ElementEntry(
    "dt",
    "Specifies a term in a description or definition list, and as such must be "
    "used inside a <dl> element.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_FIGCAPTION = ElementEntry(
    "figcaption",
    "Represents a caption or a legend associated with a figure or an "
    "illustration described by the rest of the data of the <figure> element "
    "which is its immediate ancestor.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_FIGURE = ElementEntry(
    "figure",
    "Represents self-contained content, frequently with a caption "
    "(<figcaption>), and is typically referenced as a single unit.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_HR = ElementEntry(
    "hr",
    "Represents a thematic break between paragraph-level elements (for "
    "example, a change of scene in a story, or a shift of topic with a "
    "section); historically, this has been presented as a horizontal rule or "
    "line.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_LI = ElementEntry(
    "li",
    "Represents an item in a list.\n"
    "It must be contained in a parent element: an ordered list (<ol>), an "
    "unordered list (<ul>), or a menu (<menu>).\n"
    "In menus and unordered lists, list items are usually displayed using "
    "bullet points.\n"
    "In ordered lists, they are usually displayed with an ascending counter on "
    "the left, such as a number or letter.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_MAIN = ElementEntry(
    "main",
    "Represents the dominant content of the <body> of a document, portion of a "
    "document or application.\n"
    "The main content area consists of content that is directly related to or "
    "expands upon the central topic of a document, or the central "
    "functionality of an application.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_OL = ElementEntry(
    "ol",
    "Represents an ordered list of items, typically rendered as a numbered "
    "list.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_P = ElementEntry(
    "p",
    "Represents a paragraph of text.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_PRE = ElementEntry(
    "pre",
    "Represents preformatted text which is to be presented exactly as written "
    "in the HTML file.",
    category=ElementCategory.TEXT_CONTENT,
)

ELEMENT_UL = ElementEntry(
    "ul",
    "Represents an unordered list of items, typically rendered as a bulleted "
    "list.",
    category=ElementCategory.TEXT_CONTENT,
)

# Inline text semantics

ELEMENT_A = ElementEntry(
    "a",
    "Creates a hyperlink to other web pages, files, locations within the same "
    "page, email addresses, or any other URL.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_ABBR = ElementEntry(
    "abbr",
    "Represents an abbreviation or acronym; the optional title attribute can "
    "provide an expansion or description for the abbreviation.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_B = ElementEntry(
    "b",
    "Used to draw the reader's attention to the element's contents, which are "
    "not otherwise granted special importance.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_BDI = ElementEntry(
    "bdi",
    "Used to indicate spans of text which might need to be rendered in the "
    "opposite direction than the surrounding text.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_BDO = ElementEntry(
    "bdo",
    "Overrides the current directionality of text, so that the text within is "
    "rendered in a different direction.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_BR = ElementEntry(
    "br",
    "Produces a line break in text (carriage-return).\n"
    "It is useful for writing a poem or an address, where the division of "
    "lines is significant.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_CITE = ElementEntry(
    "cite",
    "Used to describe a reference to a cited creative work, and must include "
    "either the title or the URL of that work.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_CODE = ElementEntry(
    "code",
    "Displays its contents styled in a fashion intended to indicate that the "
    "text is a short fragment of computer code.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_DATA = ElementEntry(
    "data",
    "Links a given content with a machine-readable translation.\n"
    "If the content is time- or date-related, the <time> element must be used.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_DFN = ElementEntry(
    "dfn",
    "Used to indicate the term being defined within the context of a "
    "definition phrase or sentence.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_EM = ElementEntry(
    "em",
    "Marks text that has stress emphasis.\n"
    "The <em> element can be nested, with each level of nesting indicating a "
    "greater degree of emphasis.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_I = ElementEntry(
    "i",
    "Represents a range of text that is set off from the normal text for some "
    "reason.\n"
    "Some examples include technical terms or foreign language phrases.\n"
    "It is typically displayed in italic type.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_KBD = ElementEntry(
    "kbd",
    "Represents a span of inline text denoting textual user input from a "
    "keyboard, voice input, or any other text entry device.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_MARK = ElementEntry(
    "mark",
    "Represents text which is marked or highlighted for reference or notation "
    "purposes, due to the marked passage's relevance or importance in the "
    "enclosing context.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_Q = ElementEntry(
    "q",
    "Indicates that the enclosed text is a short inline quotation.\n"
    "Most modern browsers implement this by surrounding the text in quotation "
    "marks.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_RB = ElementEntry(
    "rb",
    "Used to delimit the base text component of a <ruby> annotation, i.e. the "
    "text that is being annotated.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_RP = ElementEntry(
    "rp",
    "Used to provide fall-back parentheses for browsers that do not support "
    "display of ruby annotations using the <ruby> element.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_RT = ElementEntry(
    "rt",
    "Specifies the ruby text component of a ruby annotation, which is used to "
    "provide pronunciation, translation, or transliteration information for "
    "East Asian typography.\n"
    "The <rt> element must always be contained within a <ruby> element.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_RTC = ElementEntry(
    "rtc",
    "Embraces semantic annotations of characters presented in a ruby of <rb> "
    "elements used inside of <ruby> element.\n"
    "<rb> elements can have both pronunciation (<rt>) and semantic (<rtc>) "
    "annotations.\n",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_RUBY = ElementEntry(
    "ruby",
    "Represents a ruby annotation.\n"
    "Ruby annotations are for showing pronunciation of East Asian characters.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_S = ElementEntry(
    "s",
    "Renders text with a strikethrough, or a line through it.\n"
    "Use the <s> element to represent things that are no longer relevant or no "
    "longer accurate.\n"
    "However, <s> is not appropriate when indicating document edits; for that, "
    "use the <del> and <ins> elements, as appropriate.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_SAMP = ElementEntry(
    "samp",
    "Used to enclose inline text which represents sample (or quoted) output "
    "from a computer program.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_SMALL = ElementEntry(
    "small",
    "Makes the text font size one size smaller (for example, from large to "
    "medium, or from small to x-small) down to the browser's minimum font "
    "size.\n"
    "In HTML5, this element is repurposed to represent side-comments and small "
    "print, including\n"
    "copyright and legal text, independent of its styled presentation.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_SPAN = ElementEntry(
    "span",
    "A generic inline container for phrasing content, which does not "
    "inherently represent anything.\n"
    "It can be used to group elements for styling purposes (using the class or "
    "id attributes), or because they share attribute values, such as lang.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_STRONG = ElementEntry(
    "strong",
    "Indicates that its contents have strong importance, seriousness, or "
    "urgency.\n"
    "Browsers typically render the contents in bold type.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_SUB = ElementEntry(
    "sub",
    "Specifies inline text which should be displayed as subscript for solely "
    "typographical reasons.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_SUP = ElementEntry(
    "sup",
    "Specifies inline text which is to be displayed as superscript for solely "
    "typographical reasons.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_TIME = ElementEntry(
    "time",
    "Represents a specific period in time.\n"
    "It may include the datetime attribute to translate dates into "
    "machine-readable format, allowing for better search engine results or "
    "custom features such as reminders.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_TT = ElementEntry(
    "tt",
    "The obsolete Teletype Text element creates inline text which is presented "
    "using the user agent's default monospace font face.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
    deprecated=True,
)

ELEMENT_U = ElementEntry(
    "u",
    "Represents a span of inline text which should be rendered in a way that "
    "indicates that it has a non-textual annotation.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_VAR = ElementEntry(
    "var",
    "Represents the name of a variable in a mathematical expression or a "
    "programming context.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

ELEMENT_WBR = ElementEntry(
    "wbr",
    "Represents a word break opportunity — a position within text where the "
    "browser may optionally break a line, though its line-breaking rules would "
    "not otherwise create a break at that location.",
    category=ElementCategory.INLINE_TEXT_SEMANTICS,
)

# Image and multimedia

ELEMENT_AREA = ElementEntry(
    "area",
    "Defines a hot-spot region on an image, and optionally associates it with "
    "a hypertext link.\n"
    "This element is used only within a <map> element.",
    category=ElementCategory.IMAGE_AND_MULTIMEDIA,
)

ELEMENT_AUDIO = ElementEntry(
    "audio",
    "Used to embed sound content in documents. It may contain one or more audio "
    "sources, represented using the src attribute or the <source> element: the "
    "browser will choose the most suitable one.\n"
    "It can also be the destination for streamed media, using a MediaStream.",
    category=ElementCategory.IMAGE_AND_MULTIMEDIA,
)

ELEMENT_IMG = ElementEntry(
    "img",
    "Embeds an image into the document.",
    category=ElementCategory.IMAGE_AND_MULTIMEDIA,
)

ELEMENT_MAP = ElementEntry(
    "map",
    "Used with <area> elements to define an image map (a clickable link area).",
    category=ElementCategory.IMAGE_AND_MULTIMEDIA,
)

ELEMENT_VIDEO = ElementEntry(
    "video",
    "Embeds a media player which supports video playback into the document.",
    category=ElementCategory.IMAGE_AND_MULTIMEDIA,
)

# Embedded content

ELEMENT_APPLET = ElementEntry(
    "applet",
    "Embeds a Java applet into the document; this element has been deprecated "
    "in favor of <object>.",
    category=ElementCategory.EMBEDDED_CONTENT,
    deprecated=True,
)

ELEMENT_EMBED = ElementEntry(
    "embed",
    "Embeds external content at the specified point in the document.\n"
    "This content is provided by an external application or other source of "
    "interactive content such as a browser plug-in.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

ELEMENT_IFRAME = ElementEntry(
    "iframe",
    "Represents a nested browsing context, effectively embedding another HTML "
    "page into the current page.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

ELEMENT_NOEMBED = ElementEntry(
    "noembed",
    "An obsolete, non-standard way to provide alternative, or \"fallback\", "
    "content for browsers that do not support the <embed> element or do not "
    "support the type of embedded content an author wishes to use.",
    category=ElementCategory.EMBEDDED_CONTENT,
    deprecated=True,
)

ELEMENT_OBJECT = ElementEntry(
    "object",
    "Represents an external resource, which can be treated as an image, a "
    "nested browsing context, or a resource to be handled by a plugin.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

ELEMENT_PARAM = ElementEntry(
    "param",
    "Defines parameters for an <object> element.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

ELEMENT_PICTURE = ElementEntry(
    "picture",
    "Serves as a container for zero or more <source> elements and one <img> "
    "element to provide versions of an image for different display device "
    "scenarios.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

ELEMENT_SOURCE = ElementEntry(
    "source",
    "Specifies multiple media resources for the <picture>, the <audio> "
    "element, or the <video> element.\n"
    "It is an empty element.\n"
    "It is commonly used to serve the same media content in multiple formats "
    "supported by different browsers.",
    category=ElementCategory.EMBEDDED_CONTENT,
)

# Scripting

ELEMENT_CANVAS = ElementEntry(
    "canvas",
    "Use the <canvas> element with either the canvas scripting API or the "
    "WebGL API to draw graphics and animations.",
    category=ElementCategory.SCRIPTING,
)

ELEMENT_NOSCRIPT = ElementEntry(
    "noscript",
    "Defines a section of HTML to be inserted if a script type on the page is "
    "unsupported or if scripting is currently turned off in the browser.",
    category=ElementCategory.SCRIPTING,
)

ELEMENT_SCRIPT = ElementEntry(
    "script",
    "The <script> element is used to embed or reference executable code; this "
    "is typically used to embed or refer to JavaScript code.",
    category=ElementCategory.SCRIPTING,
)

# Demarcating edits

ELEMENT_DEL = ElementEntry(
    "del",
    "Represents a range of text that has been deleted from a document.",
    category=ElementCategory.DEMARCATING_EDITS,
)

ELEMENT_INS = ElementEntry(
    "ins",
    "Represents a range of text that has been added to a document.",
    category=ElementCategory.DEMARCATING_EDITS,
)

# Table content

ELEMENT_CAPTION = ElementEntry(
    "caption",
    "Specifies the caption (or title) of a table, and if used is always the "
    "first child of a <table>.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_COL = ElementEntry(
    "col",
    "Defines a column within a table and is used for defining common semantics "
    "on all common cells.\n"
    "It is generally found within a <colgroup> element.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_COLGROUP = ElementEntry(
    "colgroup",
    "Defines a group of columns within a table.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TABLE = ElementEntry(
    "table",
    "Represents tabular data — that is, information presented in a "
    "two-dimensional table comprised of rows and columns of cells containing "
    "data.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TBODY = ElementEntry(
    "tbody",
    "Encapsulates a set of table row (<tr> elements, indicating that they "
    "comprise the body of the table (<table>).",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TD = ElementEntry(
    "td",
    "Defines a cell of a table that contains data.\n"
    "It participates in the table model.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TFOOT = ElementEntry(
    "tfoot",
    "Defines a set of rows summarizing the columns of the table.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TH = ElementEntry(
    "th",
    "Defines a cell as header of a group of table cells.\n"
    "The exact nature of this group is defined by the scope and headers "
    "attributes.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_THEAD = ElementEntry(
    "thead",
    "Defines a set of rows defining the head of the columns of the table.",
    category=ElementCategory.TABLE_CONTENT,
)

ELEMENT_TR = ElementEntry(
    "tr",
    "Defines a row of cells in a table.\n"
    "The row's cells can then be established using a mix of <td> (data cell) "
    "and <th> (header cell) elements.\n"
    "The HTML <tr> element specifies that the markup contained inside the <tr> "
    "block comprises one row of a table, inside which the <th> and <td> "
    "elements create header and data cells, respectively, within the row.",
    category=ElementCategory.TABLE_CONTENT,
)

# Forms

ELEMENT_BUTTON = ElementEntry(
    "button",
    "Represents a clickable button, which can be used in forms, or anywhere in "
    "a document that needs simple, standard button functionality.",
    category=ElementCategory.FORMS,
)

ELEMENT_DATALIST = ElementEntry(
    "datalist",
    "Contains a set of <option> elements that represent the values available "
    "for other controls.",
    category=ElementCategory.FORMS,
)

ELEMENT_FIELDSET = ElementEntry(
    "fieldset",
    "Used to group several controls as well as labels (<label>) within a web "
    "form.",
    category=ElementCategory.FORMS,
)

ELEMENT_FORM = ElementEntry(
    "form",
    "Represents a document section that contains interactive controls for "
    "submitting information to a web server.",
    category=ElementCategory.FORMS,
)

ELEMENT_INPUT = ElementEntry(
    "input",
    "Used to create interactive controls for web-based forms in order to "
    "accept data from the user.",
    category=ElementCategory.FORMS,
)

ELEMENT_LABEL = ElementEntry(
    "label",
    "Represents a caption for an item in a user interface.",
    category=ElementCategory.FORMS,
)

ELEMENT_LEGEND = ElementEntry(
    "legend",
    "Represents a caption for the content of its parent <fieldset>.",
    category=ElementCategory.FORMS,
)

ELEMENT_METER = ElementEntry(
    "meter",
    "Represents either a scalar value within a known range or a fractional "
    "value.",
    category=ElementCategory.FORMS,
)

ELEMENT_OPTGROUP = ElementEntry(
    "optgroup",
    "Creates a grouping of options within a <select> element.",
    category=ElementCategory.FORMS,
)

ELEMENT_OPTION = ElementEntry(
    "option",
    "Used to define an item contained in a <select>, an <optgroup>, or a "
    "<datalist> element.\n"
    "As such, <option> can represent menu items in popups and other lists of "
    "items in an HTML document.",
    category=ElementCategory.FORMS,
)

ELEMENT_OUTPUT = ElementEntry(
    "output",
    "A container element into which a site or app can inject the results of a "
    "calculation or the outcome of a user action.",
    category=ElementCategory.FORMS,
)

ELEMENT_PROGRESS = ElementEntry(
    "progress",
    "Displays an indicator showing the completion progress of a task, "
    "typically displayed as a progress bar.",
    category=ElementCategory.FORMS,
)

ELEMENT_SELECT = ElementEntry(
    "select",
    "Represents a control that provides a menu of options:",
    category=ElementCategory.FORMS,
)

ELEMENT_TEXTAREA = ElementEntry(
    "textarea",
    "Represents a multi-line plain-text editing control, useful when you want "
    "to allow users to enter a sizeable amount of free-form text, for example "
    "a comment on a review or feedback form.",
    category=ElementCategory.FORMS,
)

# Interactive elements

ELEMENT_DETAILS = ElementEntry(
    "details",
    "Creates a disclosure widget in which information is visible only when the "
    "widget is toggled into an \"open\" state.",
    category=ElementCategory.INTERACTIVE_ELEMENTS,
)

ELEMENT_DIALOG = ElementEntry(
    "dialog",
    "Represents a dialog box or other interactive component, such as an "
    "inspector or window.",
    category=ElementCategory.INTERACTIVE_ELEMENTS,
)

ELEMENT_MENU = ElementEntry(
    "menu",
    "Represents a group of commands that a user can perform or activate.\n"
    "This includes both list menus, which might appear across the top of a "
    "screen, as well as context menus, such as those that might appear "
    "underneath a button after it has been clicked.",
    category=ElementCategory.INTERACTIVE_ELEMENTS,
)

ELEMENT_MENUITEM = ElementEntry(
    "menuitem",
    "Represents a command that a user is able to invoke through a popup menu.\n"
    "This includes context menus, as well as menus that might be attached to a "
    "menu button.",
    category=ElementCategory.INTERACTIVE_ELEMENTS,
    deprecated=True,
)

ELEMENT_SUMMARY = ElementEntry(
    "summary",
    "Specifies a summary, caption, or legend for a <details> element's "
    "disclosure box.",
    category=ElementCategory.INTERACTIVE_ELEMENTS,
)

# Web Components

ELEMENT_CONTENT = ElementEntry(
    "content",
    "An obsolete part of the Web Components suite of technologies.\n"
    "It was used inside of Shadow DOM as an insertion point, and wasn't meant "
    "to be used in ordinary HTML.",
    category=ElementCategory.WEB_COMPONENTS,
    deprecated=True,
)

ELEMENT_ELEMENT = ElementEntry(
    "element",
    "The obsolete <element> element was part of the Web Components "
    "specification; it was intended to be used to define new custom DOM "
    "elements.",
    category=ElementCategory.WEB_COMPONENTS,
    deprecated=True,
)

ELEMENT_SHADOW = ElementEntry(
    "shadow",
    "An obsolete part of the Web Components technology suite.\n"
    "It was intended to be used as a shadow DOM insertion point.",
    category=ElementCategory.WEB_COMPONENTS,
    deprecated=True,
)

ELEMENT_SLOT = ElementEntry(
    "slot",
    "Part of the Web Components technology suite.\n"
    "It is a placeholder inside a web component that you can fill with your "
    "own markup, which lets you create separate DOM trees and present them "
    "together.",
    category=ElementCategory.WEB_COMPONENTS,
)

ELEMENT_TEMPLATE = ElementEntry(
    "template",
    "A mechanism for holding client-side content that is not to be rendered "
    "when a page is loaded but may subsequently be instantiated during runtime "
    "using JavaScript.",
    category=ElementCategory.WEB_COMPONENTS,
)


HTML_ELEMENTS: tuple[ElementEntry, ...] = (
    ELEMENT_HTML,
    ELEMENT_LINK,
    ELEMENT_META,
    ELEMENT_STYLE,
    ELEMENT_TITLE,
    ELEMENT_BODY,
    ELEMENT_ADDRESS,
    ELEMENT_ARTICLE,
    ELEMENT_ASIDE,
    ELEMENT_FOOTER,
    ELEMENT_HEAD,
    ELEMENT_HEADER,
    ELEMENT_H1,
    ELEMENT_H2,
    ELEMENT_H3,
    ELEMENT_H4,
    ELEMENT_H5,
    ELEMENT_H6,
    ELEMENT_HGROUP,
    ELEMENT_NAV,
    ELEMENT_SECTION,
    ELEMENT_BLOCKQUOTE,
    ELEMENT_DD,
    ELEMENT_DIR,
    ELEMENT_DIV,
    ELEMENT_DL,
    ELEMENT_DT,
    ELEMENT_FIGCAPTION,
    ELEMENT_FIGURE,
    ELEMENT_HR,
    ELEMENT_LI,
    ELEMENT_MAIN,
    ELEMENT_OL,
    ELEMENT_P,
    ELEMENT_PRE,
    ELEMENT_UL,
    ELEMENT_A,
    ELEMENT_ABBR,
    ELEMENT_B,
    ELEMENT_BDI,
    ELEMENT_BDO,
    ELEMENT_BR,
    ELEMENT_CITE,
    ELEMENT_CODE,
    ELEMENT_DATA,
    ELEMENT_DFN,
    ELEMENT_EM,
    ELEMENT_I,
    ELEMENT_KBD,
    ELEMENT_MARK,
    ELEMENT_Q,
    ELEMENT_RB,
    ELEMENT_RP,
    ELEMENT_RT,
    ELEMENT_RTC,
    ELEMENT_RUBY,
    ELEMENT_S,
    ELEMENT_SAMP,
    ELEMENT_SMALL,
    ELEMENT_SPAN,
    ELEMENT_STRONG,
    ELEMENT_SUB,
    ELEMENT_SUP,
    ELEMENT_TIME,
    ELEMENT_TT,
    ELEMENT_U,
    ELEMENT_VAR,
    ELEMENT_WBR,
    ELEMENT_AREA,
    ELEMENT_AUDIO,
    ELEMENT_IMG,
    ELEMENT_MAP,
    ELEMENT_VIDEO,
    ELEMENT_APPLET,
    ELEMENT_EMBED,
    ELEMENT_IFRAME,
    ELEMENT_NOEMBED,
    ELEMENT_OBJECT,
    ELEMENT_PARAM,
    ELEMENT_PICTURE,
    ELEMENT_SOURCE,
    ELEMENT_CANVAS,
    ELEMENT_NOSCRIPT,
    ELEMENT_SCRIPT,
    ELEMENT_DEL,
    ELEMENT_INS,
    ELEMENT_CAPTION,
    ELEMENT_COL,
    ELEMENT_COLGROUP,
    ELEMENT_TABLE,
    ELEMENT_TBODY,
    ELEMENT_TD,
    ELEMENT_TFOOT,
    ELEMENT_TH,
    ELEMENT_THEAD,
    ELEMENT_TR,
    ELEMENT_BUTTON,
    ELEMENT_DATALIST,
    ELEMENT_FIELDSET,
    ELEMENT_FORM,
    ELEMENT_INPUT,
    ELEMENT_LABEL,
    ELEMENT_LEGEND,
    ELEMENT_METER,
    ELEMENT_OPTGROUP,
    ELEMENT_OPTION,
    ELEMENT_OUTPUT,
    ELEMENT_PROGRESS,
    ELEMENT_SELECT,
    ELEMENT_TEXTAREA,
    ELEMENT_DETAILS,
    ELEMENT_DIALOG,
    ELEMENT_MENU,
    ELEMENT_MENUITEM,
    ELEMENT_SUMMARY,
    ELEMENT_CONTENT,
    ELEMENT_ELEMENT,
    ELEMENT_SHADOW,
    ELEMENT_SLOT,
    ELEMENT_TEMPLATE,
)

ELEMENTS_BY_NAME: dict[str, ElementEntry] = {
    element.name: element for element in HTML_ELEMENTS
}
