import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

# elements that start a new line of text; inline tags such as <b> or <a> do not
BLOCK_TAGS = [
    'address', 'article', 'aside', 'blockquote', 'br', 'dd', 'div', 'dl', 'dt',
    'fieldset', 'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3',
    'h4', 'h5', 'h6', 'header', 'hr', 'li', 'main', 'nav', 'ol', 'p', 'pre',
    'section', 'table', 'td', 'th', 'title', 'tr', 'ul',
]


def html_to_lines(content):
    """Visible text lines of an HTML document, without scripts and styles."""
    if not content:
        return []
    soup = BeautifulSoup(content, 'lxml')
    for script_or_style in soup(['script', 'style']):
        script_or_style.decompose()
    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before("\n")
        block.insert_after("\n")
    return soup.get_text().splitlines()


def read_lines(path, html=False):
    try:
        if html:
            with open(path, 'rb') as f:
                return html_to_lines(f.read())
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise
    except PermissionError:
        raise
    except OSError as e:
        raise OSError(f"Failed to read file '{path}': {e}") from e


def read_all_lines(paths, html=False):
    lines = []
    for path in paths:
        lines.extend(read_lines(path, html=html))
    return lines
