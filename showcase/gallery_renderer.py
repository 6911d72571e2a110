"""Static HTML gallery generation."""

import html as html_lib
from pathlib import Path
from typing import Dict, List, Optional

from .models import FILTER_CATEGORIES, PLACEHOLDER_IMAGE, DisplayRecord
from .projection import resolve_click_action

FILTER_LABELS = {
    'all': 'All',
    'video': 'Videos',
    'shorts': 'Shorts',
    'thumbnail': 'Thumbnails',
}

STYLE = '''
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; background: #0f0f0f; color: #fff; padding: 24px; }
        .filters { display: flex; gap: 12px; margin-bottom: 24px; flex-wrap: wrap; }
        .filter-btn { color: #aaa; text-decoration: none; padding: 8px 16px; border-radius: 18px; background: #222; }
        .filter-btn.active { color: #000; background: #fff; }
        .projects-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 20px; }
        .projects-grid.mode-shorts { grid-template-columns: repeat(auto-fill, minmax(180px, 1fr)); }
        .project-card { cursor: pointer; border-radius: 12px; overflow: hidden; background: #1a1a1a; }
        .project-thumbnail { position: relative; aspect-ratio: 16 / 9; }
        .mode-shorts .project-thumbnail { aspect-ratio: 9 / 16; }
        .project-thumbnail img { width: 100%; height: 100%; object-fit: cover; display: block; }
        .play-overlay { position: absolute; inset: 0; display: flex; align-items: center; justify-content: center; font-size: 40px; }
        .project-info { display: flex; gap: 10px; align-items: center; padding: 12px; }
        .channel-pfp { width: 36px; height: 36px; border-radius: 50%; }
        .channel-subs { color: #aaa; font-size: 13px; }
        .empty, .message { grid-column: 1 / -1; text-align: center; color: #aaa; }
        .modal { display: none; position: fixed; inset: 0; background: rgba(0, 0, 0, 0.9); align-items: center; justify-content: center; }
        .modal iframe { width: 80vw; height: 45vw; border: 0; }
        .modal img { max-width: 90vw; max-height: 90vh; }
'''

SCRIPT = '''
        const modal = document.getElementById('modal');
        const body = document.getElementById('modal-body');
        document.querySelectorAll('.project-card').forEach(card => {
            card.addEventListener('click', () => {
                const kind = card.dataset.action;
                const target = card.dataset.target;
                if (kind === 'link') { window.open(target, '_blank'); return; }
                body.innerHTML = '';
                const el = document.createElement(kind === 'video' ? 'iframe' : 'img');
                el.src = target;
                if (kind === 'video') el.allow = 'autoplay; encrypted-media';
                body.appendChild(el);
                modal.style.display = 'flex';
            });
        });
        modal.addEventListener('click', () => { modal.style.display = 'none'; body.innerHTML = ''; });
'''


def page_filename(category: str) -> str:
    return 'index.html' if category == 'all' else f'{category}.html'


def _escape(value: Optional[str]) -> str:
    return html_lib.escape(value or '', quote=True)


def render_card(item: DisplayRecord) -> str:
    action = resolve_click_action(item.record)
    channel = item.channel

    overlay = '<div class="play-overlay">&#9654;</div>' if item.playable else ''
    subs = (f'<div class="channel-subs">{_escape(channel.subscriber_count)} Subs</div>'
            if channel.subscriber_count else '')

    return f'''            <div class="project-card" data-type="{_escape(item.record.type)}" data-action="{_escape(action.kind)}" data-target="{_escape(action.target)}">
                <div class="project-thumbnail">
                    <img src="{_escape(item.thumbnail_url)}" onerror="this.src='{PLACEHOLDER_IMAGE}'" alt="Project" loading="lazy">
                    {overlay}
                </div>
                <div class="project-info">
                    <img class="channel-pfp" src="{_escape(channel.avatar_url)}" alt="{_escape(channel.title)}">
                    <div class="channel-details">
                        <div class="channel-name">{_escape(channel.title)}</div>
                        {subs}
                    </div>
                </div>
            </div>
'''


def _render_filters(category: str) -> str:
    links = []
    for name in FILTER_CATEGORIES:
        active = ' active' if name == category else ''
        links.append(f'<a class="filter-btn{active}" href="{page_filename(name)}" data-filter="{name}">{FILTER_LABELS[name]}</a>')
    return '\n        '.join(links)


def _render_page(title: str, filters: str, grid_class: str, content: str, footer: str = '') -> str:
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_escape(title)}</title>
    <style>{STYLE}    </style>
</head>
<body>
    <nav class="filters">
        {filters}
    </nav>
    <div class="{grid_class}" id="projects-grid">
{content}    </div>
    <div class="modal" id="modal"><div id="modal-body"></div></div>
    {footer}
    <script>{SCRIPT}    </script>
</body>
</html>
'''


def render_gallery(items: List[DisplayRecord], category: str = 'all', title: str = 'Projects',
                   admin_url: str = '') -> str:
    grid_class = 'projects-grid' if category == 'all' else f'projects-grid mode-{category}'

    if items:
        content = ''.join(render_card(item) for item in items)
    else:
        content = '        <div class="empty">No projects found.</div>\n'

    footer = f'<footer><a href="{_escape(admin_url)}">Admin</a></footer>' if admin_url else ''
    return _render_page(title, _render_filters(category), grid_class, content, footer)


def render_message(message: str, title: str = 'Projects') -> str:
    """Static page shown in place of the gallery when it cannot be built."""
    content = f'        <p class="message">{_escape(message)}</p>\n'
    return _render_page(title, '', 'projects-grid', content)


def write_pages(pages: Dict[str, str], output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for category, html in pages.items():
        path = output_dir / page_filename(category)
        path.write_text(html, encoding='utf-8')
        written.append(path)
    return written
