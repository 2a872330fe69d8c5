"""HTML fragments and page shell for the published blog"""

from mdblog.core.dates import format_date_dmy, format_date_long
from mdblog.core.models import PostRecord
from mdblog.core.posts import page_href
from mdblog.core.render.escape import escape_attr, escape_html
from mdblog.core.utils.slug import slugify


LABELS = {
    'pt': {'written': 'Escrito por {author} em {date}', 'unknown': 'Autor desconhecido',
           'error': 'Erro', 'empty': 'Nenhuma categoria encontrada.', 'categories': 'Categorias'},
    'en': {'written': 'Written by {author} on {date}', 'unknown': 'Unknown author',
           'error': 'Error', 'empty': 'No categories found.', 'categories': 'Categories'},
}


def post_meta_html(post: PostRecord, locale: str = 'pt') -> str:
    """Byline plus category badge; every field is escaped."""
    labels = LABELS[locale]
    byline = labels['written'].format(
        author=escape_html(post.author or labels['unknown']),
        date=escape_html(format_date_long(post.date, locale)),
    )
    return f'{byline} <span class="badge">{escape_html(post.category)}</span>'


def post_card_html(post: PostRecord) -> str:
    href = escape_attr(escape_html(page_href(post)))
    return (
        '<div class="card">'
        f'<a href="{href}"><strong>{escape_html(post.title)}</strong></a>'
        '<div class="meta">'
        f'<span>{escape_html(format_date_dmy(post.date))}</span> '
        f'<span class="badge">{escape_html(post.category)}</span>'
        '</div>'
        f'<p>{escape_html(post.excerpt)}</p>'
        '</div>'
    )


def _post_item_html(post: PostRecord) -> str:
    href = escape_attr(escape_html(page_href(post)))
    return (
        f'<li><a href="{href}">{escape_html(post.title)}</a>'
        f'<div class="meta"><span>{escape_html(post.date or "")}</span> '
        f'<span class="badge">{escape_html(post.category)}</span></div></li>'
    )


def category_section_html(category: str, posts: list[PostRecord]) -> str:
    items = ''.join(_post_item_html(p) for p in posts)
    return (
        f'<div class="card" id="{escape_attr(slugify(category))}">'
        f'<h2>{escape_html(category)}</h2>'
        f'<ul>{items}</ul>'
        '</div>'
    )


def empty_categories_html(locale: str = 'pt') -> str:
    return f'<div class="card">{LABELS[locale]["empty"]}</div>'


def error_card_html(message: str, locale: str = 'pt') -> str:
    """Fallback shown in place of content that could not be loaded."""
    return f'<div class="card">{LABELS[locale]["error"]}: {escape_html(message)}</div>'


def page_html(title: str, content: str, meta: str = '', lang: str = 'pt') -> str:
    """Minimal document shell with the #title, #meta and #content slots filled."""
    return (
        '<!DOCTYPE html>\n'
        f'<html lang="{lang}">\n'
        '<head>\n'
        '<meta charset="utf-8">\n'
        f'<title>{escape_html(title)}</title>\n'
        '</head>\n'
        '<body>\n'
        f'<h1 id="title">{escape_html(title)}</h1>\n'
        f'<div id="meta">{meta}</div>\n'
        f'<div id="content">{content}</div>\n'
        '</body>\n'
        '</html>\n'
    )
