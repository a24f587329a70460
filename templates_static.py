"""Templates and static file generation."""

from pathlib import Path

APP_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = APP_DIR / "templates"
STATIC_DIR = APP_DIR / "static"

# Template content
BASE_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{{ title or 'LoRA Tagger' }}</title>
  <link rel="stylesheet" href="/static/app.css">
</head>
<body>
  <header class="topbar">
    <nav>
      <a href="/" class="brand">🏷️ LoRA Tagger</a>
      <span class="muted">Tag your training images with ease</span>
      {% if last_scan %}<span class="muted last-scan">Last scan: {{ last_scan | datetime }}</span>{% endif %}
    </nav>
  </header>
  <main class="container">
    {% block content %}{% endblock %}
  </main>
  {% block scripts %}{% endblock %}
</body>
</html>
"""

INDEX_HTML = """{% extends 'base.html' %}
{% block content %}
<section class="selector" id="selector">
  <form id="scanForm" class="scan-form">
    <label for="directoryPath">Directory path</label>
    <div class="path-input">
      <input id="directoryPath" name="directoryPath" value="{{ last_dir }}" placeholder="~/Pictures/my-training-images" autocomplete="off" />
      <button type="button" id="browseBtn">📂 Browse</button>
    </div>
    <label class="inline">
      <input type="checkbox" id="includeSubfolders" {% if include_subfolders %}checked{% endif %}>
      Include subfolders
    </label>
    <button type="submit" id="loadBtn">Load images</button>
  </form>
</section>

<div class="flash error" id="errorBanner" hidden>
  <span>⚠️ <span id="errorText"></span></span>
  <button type="button" id="dismissError" title="Dismiss">×</button>
</div>

<div class="loading" id="loading" hidden>
  <div class="spinner"></div>
  <p>Scanning directory…</p>
</div>

<div class="workspace" id="workspace" hidden>
  <section class="gallery">
    <div class="gallery-header">
      <div class="stats" id="stats"></div>
      <div class="gallery-controls">
        <div class="size-buttons" id="sizeButtons">
          <button type="button" data-size="small">S</button>
          <button type="button" data-size="medium" class="active">M</button>
          <button type="button" data-size="large">L</button>
        </div>
        <button type="button" id="selectAll" title="Select all visible images">✓ Select all visible</button>
        <button type="button" id="clearSelection" hidden>Clear selection</button>
        <input type="search" id="search" placeholder="🔍 Filename or tag (use -tag to find images missing a tag)" />
      </div>
    </div>
    <div id="galleryContent"></div>
    <p class="muted no-results" id="noResults" hidden>No images match your search</p>
  </section>
  <aside class="sidebar" id="sidebar" hidden></aside>
</div>

<div class="empty" id="emptyState">
  <div class="empty-icon">📁</div>
  <h3>No images loaded yet</h3>
  <p class="muted">Select a directory above to get started</p>
</div>

<div class="modal-overlay" id="folderBrowser" hidden>
  <div class="modal">
    <div class="modal-header">
      <h3>Browse folders</h3>
      <button type="button" id="closeBrowser">×</button>
    </div>
    <div class="modal-body">
      <div class="current-path"><span class="muted">Current:</span> <code id="browserPath"></code></div>
      <button type="button" id="browserUp">⬆️ Up one level</button>
      <div class="flash error" id="browserError" hidden></div>
      <ul class="folder-list" id="folderList"></ul>
    </div>
    <div class="modal-footer">
      <button type="button" id="cancelBrowser">Cancel</button>
      <button type="button" id="selectFolder" class="primary">Select this folder</button>
    </div>
  </div>
</div>
{% endblock %}
{% block scripts %}<script src="/static/app.js"></script>{% endblock %}
"""

APP_JS = """// LoRA Tagger UI. All mutable state lives in the TaggerApp instance; render
// functions receive what they draw plus callbacks.

const THUMB_WIDTHS = { small: 200, medium: 360, large: 640 };

async function api(url, body) {
    const options = body === undefined ? {} : {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(body),
    };
    const res = await fetch(url, options);
    const data = await res.json().catch(() => ({}));
    if (!res.ok) {
        throw new Error(data.error || `Request failed (${res.status})`);
    }
    return data;
}

function el(tag, attrs = {}, children = []) {
    const node = document.createElement(tag);
    Object.entries(attrs).forEach(([key, value]) => {
        if (key === 'class') node.className = value;
        else if (key === 'text') node.textContent = value;
        else if (key.startsWith('on')) node.addEventListener(key.slice(2), value);
        else node.setAttribute(key, value);
    });
    children.forEach(child => node.appendChild(child));
    return node;
}

function matchesSearch(image, term) {
    const search = term.toLowerCase().trim();
    if (!search) return true;
    if (search.startsWith('-')) {
        const missing = search.slice(1);
        return !image.tags.some(tag => tag.toLowerCase().includes(missing));
    }
    return image.name.toLowerCase().includes(search)
        || image.tags.some(tag => tag.toLowerCase().includes(search));
}

function groupByDirectory(images) {
    const grouped = new Map();
    images.forEach(image => {
        const dir = image.directory || 'Unknown';
        if (!grouped.has(dir)) grouped.set(dir, []);
        grouped.get(dir).push(image);
    });
    return Array.from(grouped.entries()).sort((a, b) => a[0].localeCompare(b[0]));
}

function tagInput(placeholder, onCommit, onCancel) {
    const input = el('input', { type: 'text', class: 'tag-input', placeholder });
    let done = false;
    const commit = () => {
        if (done) return;
        done = true;
        const value = input.value.trim();
        if (value) onCommit(value);
        else onCancel();
    };
    input.addEventListener('keydown', e => {
        if (e.key === 'Enter') commit();
        else if (e.key === 'Escape') { done = true; onCancel(); }
    });
    input.addEventListener('blur', commit);
    return input;
}

function renderCard(image, isSelected, size, handlers) {
    const card = el('article', { class: `card ${isSelected ? 'selected' : ''}` });
    card.addEventListener('click', e => {
        if (e.target.closest('.meta')) return;
        handlers.onToggleSelection(image.id);
    });
    card.addEventListener('dblclick', () => {
        window.open(`/api/image/${encodeURIComponent(image.relativePath)}`, '_blank');
    });

    card.appendChild(el('div', { class: 'check', text: isSelected ? '✓' : '' }));
    card.appendChild(el('img', {
        loading: 'lazy',
        alt: image.name,
        src: `/api/thumb/${encodeURIComponent(image.relativePath)}?w=${THUMB_WIDTHS[size]}`,
    }));

    const meta = el('div', { class: 'meta' });
    meta.appendChild(el('div', { class: 'fn', title: image.name, text: image.name }));
    if (image.width && image.height) {
        meta.appendChild(el('div', { class: 'muted dims', text: `${image.width} × ${image.height}` }));
    }

    const chips = el('div', { class: 'chips' });
    image.tags.forEach((tag, index) => {
        const chip = el('span', { class: 'chip', draggable: 'true' }, [
            el('span', { class: 'drag-handle', text: '⋮⋮' }),
            document.createTextNode(tag),
            el('button', {
                title: `Remove tag ${tag}`,
                text: '×',
                onclick: () => handlers.onUpdateTags(image.id, image.tags.filter(t => t !== tag)),
            }),
        ]);
        chip.addEventListener('dragstart', e => {
            chips.dataset.dragIndex = index;
            e.dataTransfer.effectAllowed = 'move';
            chip.classList.add('dragging');
        });
        chip.addEventListener('dragover', e => { e.preventDefault(); e.dataTransfer.dropEffect = 'move'; });
        chip.addEventListener('drop', e => {
            e.preventDefault();
            const from = Number(chips.dataset.dragIndex);
            if (Number.isNaN(from) || from === index) return;
            const reordered = [...image.tags];
            const [moved] = reordered.splice(from, 1);
            reordered.splice(index, 0, moved);
            handlers.onUpdateTags(image.id, reordered);
        });
        chip.addEventListener('dragend', () => chip.classList.remove('dragging'));
        chips.appendChild(chip);
    });

    const addButton = el('button', { class: 'pill', text: '+ Add tag' });
    addButton.addEventListener('click', () => {
        const input = tagInput('Enter tag…', value => {
            if (!image.tags.includes(value)) handlers.onUpdateTags(image.id, [...image.tags, value]);
            else input.replaceWith(addButton);
        }, () => input.replaceWith(addButton));
        addButton.replaceWith(input);
        input.focus();
    });
    chips.appendChild(addButton);
    meta.appendChild(chips);
    card.appendChild(meta);
    return card;
}

function renderGallery(container, images, selectedIds, size, handlers) {
    container.innerHTML = '';
    const grid = items => {
        const node = el('div', { class: `grid size-${size}` });
        items.forEach(image => node.appendChild(renderCard(image, selectedIds.has(image.id), size, handlers)));
        return node;
    };
    const groups = groupByDirectory(images);
    if (groups.length <= 1) {
        container.appendChild(grid(images));
        return;
    }
    groups.forEach(([directory, dirImages]) => {
        container.appendChild(el('div', { class: 'directory-header' }, [
            el('h3', { text: `📁 ${directory}` }),
            el('span', { class: 'muted', text: `${dirImages.length} images` }),
        ]));
        container.appendChild(grid(dirImages));
    });
}

function renderSidebar(container, analysis, selectedCount, handlers) {
    container.innerHTML = '';
    container.appendChild(el('div', { class: 'sidebar-header' }, [
        el('h3', { text: 'Multi-tag editor' }),
        el('button', { title: 'Close', text: '×', onclick: handlers.onClearSelection }),
    ]));
    container.appendChild(el('p', { class: 'selected-count', text: `${selectedCount} images selected` }));

    const addButton = el('button', { class: 'pill', text: '+ Add new tag to all' });
    addButton.addEventListener('click', () => {
        const input = tagInput('Enter new tag…', value => handlers.onAddTag(value), () => input.replaceWith(addButton));
        addButton.replaceWith(input);
        input.focus();
    });
    container.appendChild(addButton);

    if (!analysis) return;
    const common = analysis.tags.filter(t => t.isCommon);
    const partial = analysis.tags.filter(t => !t.isCommon);
    const section = (title, infos, describe) => {
        if (!infos.length) return;
        container.appendChild(el('h4', { text: `${title} (${infos.length})` }));
        const list = el('div', { class: 'chips' });
        infos.forEach(info => list.appendChild(el('button', {
            class: `chip ${info.isCommon ? 'common' : 'partial'}`,
            title: describe(info),
            text: info.isCommon ? `${info.tag} −` : `${info.tag} ${info.count}/${analysis.totalImages} +`,
            onclick: () => handlers.onToggleTag(info.tag),
        })));
        container.appendChild(list);
    };
    section('✓ Common tags', common, info => `Remove "${info.tag}" from all images`);
    section('◐ Partial tags', partial,
        info => `Add "${info.tag}" to all images (currently on ${info.count}/${analysis.totalImages})`);
    if (!common.length && !partial.length) {
        container.appendChild(el('p', { class: 'muted', text: 'No tags on selected images yet.' }));
    }
}

class FolderBrowser {
    constructor(onSelect, onError) {
        this.onSelect = onSelect;
        this.currentPath = '~';
        this.parentPath = null;
        this.overlay = document.getElementById('folderBrowser');
        this.list = document.getElementById('folderList');
        this.pathLabel = document.getElementById('browserPath');
        this.error = document.getElementById('browserError');
        document.getElementById('closeBrowser').addEventListener('click', () => this.close());
        document.getElementById('cancelBrowser').addEventListener('click', () => this.close());
        document.getElementById('browserUp').addEventListener('click', () => {
            if (this.parentPath) this.load(this.parentPath);
        });
        document.getElementById('selectFolder').addEventListener('click', () => {
            this.onSelect(this.currentPath);
            this.close();
        });
        this.overlay.addEventListener('click', e => { if (e.target === this.overlay) this.close(); });
    }

    open(path) {
        this.overlay.hidden = false;
        this.load(path || '~');
    }

    close() {
        this.overlay.hidden = true;
    }

    async load(path) {
        this.error.hidden = true;
        try {
            const data = await api('/api/list-directory', { directoryPath: path });
            this.currentPath = data.currentPath;
            this.parentPath = data.parentPath;
            this.pathLabel.textContent = data.currentPath;
            this.list.innerHTML = '';
            data.directories.forEach(dir => this.list.appendChild(
                el('li', { text: `📁 ${dir.name}`, onclick: () => this.load(dir.path) })));
            if (!data.directories.length) {
                this.list.appendChild(el('li', { class: 'muted', text: 'No subfolders' }));
            }
        } catch (err) {
            this.error.textContent = err.message;
            this.error.hidden = false;
            this.list.innerHTML = '';
        }
    }
}

class TaggerApp {
    constructor() {
        this.state = {
            images: [],
            selectedIds: new Set(),
            search: '',
            size: 'medium',
            analysis: null,
        };
        this.dom = {
            form: document.getElementById('scanForm'),
            path: document.getElementById('directoryPath'),
            recursive: document.getElementById('includeSubfolders'),
            load: document.getElementById('loadBtn'),
            errorBanner: document.getElementById('errorBanner'),
            errorText: document.getElementById('errorText'),
            loading: document.getElementById('loading'),
            workspace: document.getElementById('workspace'),
            empty: document.getElementById('emptyState'),
            stats: document.getElementById('stats'),
            gallery: document.getElementById('galleryContent'),
            noResults: document.getElementById('noResults'),
            sidebar: document.getElementById('sidebar'),
            clearSelection: document.getElementById('clearSelection'),
        };
        this.handlers = {
            onToggleSelection: id => this.toggleSelection(id),
            onUpdateTags: (id, tags) => this.updateTags(id, tags),
            onClearSelection: () => this.clearSelection(),
            onToggleTag: tag => this.applyToSelection('/api/selection/toggle-tag', tag),
            onAddTag: tag => this.applyToSelection('/api/selection/add-tag', tag),
        };
        this.browser = new FolderBrowser(path => { this.dom.path.value = path; });
        this.bind();
    }

    bind() {
        this.dom.form.addEventListener('submit', e => {
            e.preventDefault();
            const path = this.dom.path.value.trim();
            if (path) this.loadImages(path, this.dom.recursive.checked);
        });
        document.getElementById('browseBtn').addEventListener('click',
            () => this.browser.open(this.dom.path.value.trim()));
        document.getElementById('dismissError').addEventListener('click', () => this.showError(null));
        document.getElementById('search').addEventListener('input', e => {
            this.state.search = e.target.value;
            this.render();
        });
        document.getElementById('selectAll').addEventListener('click', () => {
            this.state.selectedIds = new Set(this.visibleImages().map(img => img.id));
            this.selectionChanged();
        });
        this.dom.clearSelection.addEventListener('click', () => this.clearSelection());
        document.querySelectorAll('#sizeButtons button').forEach(button => {
            button.addEventListener('click', () => {
                this.state.size = button.dataset.size;
                document.querySelectorAll('#sizeButtons button')
                    .forEach(b => b.classList.toggle('active', b === button));
                this.render();
            });
        });
    }

    showError(message) {
        this.dom.errorBanner.hidden = !message;
        this.dom.errorText.textContent = message || '';
    }

    visibleImages() {
        return this.state.images.filter(image => matchesSearch(image, this.state.search));
    }

    selectedImages() {
        return this.state.images.filter(img => this.state.selectedIds.has(img.id));
    }

    async loadImages(directoryPath, includeSubfolders) {
        this.dom.loading.hidden = false;
        this.dom.load.disabled = true;
        this.showError(null);
        this.state.selectedIds = new Set();
        this.state.analysis = null;
        try {
            const data = await api('/api/scan-directory', { directoryPath, includeSubfolders });
            this.state.images = data.images;
        } catch (err) {
            this.showError(err.message);
            this.state.images = [];
        } finally {
            this.dom.loading.hidden = true;
            this.dom.load.disabled = false;
            this.render();
        }
    }

    replaceTags(updates) {
        const byId = new Map(updates.map(u => [u.id, u.tags]));
        this.state.images = this.state.images.map(img => byId.has(img.id) ? { ...img, tags: byId.get(img.id) } : img);
    }

    async updateTags(imageId, tags) {
        const image = this.state.images.find(img => img.id === imageId);
        if (!image) return;
        try {
            await api('/api/update-tags', { textFilePath: image.textFilePath, tags });
            this.replaceTags([{ id: imageId, tags }]);
        } catch (err) {
            this.showError(`Failed to save tags: ${err.message}`);
        }
        this.selectionChanged();
    }

    toggleSelection(imageId) {
        const selected = new Set(this.state.selectedIds);
        if (selected.has(imageId)) selected.delete(imageId);
        else selected.add(imageId);
        this.state.selectedIds = selected;
        this.selectionChanged();
    }

    clearSelection() {
        this.state.selectedIds = new Set();
        this.selectionChanged();
    }

    async selectionChanged() {
        this.state.analysis = null;
        this.render();
        const images = this.selectedImages();
        if (!images.length) return;
        try {
            const analysis = await api('/api/selection/analyze', {
                images: images.map(img => ({ id: img.id, tags: img.tags })),
            });
            this.state.analysis = analysis;
            this.render();
        } catch (err) {
            this.showError(err.message);
        }
    }

    async applyToSelection(url, tag) {
        const images = this.selectedImages().map(img => ({
            id: img.id, textFilePath: img.textFilePath, tags: img.tags,
        }));
        try {
            const result = await api(url, { images, tag });
            this.replaceTags(result.updated);
            if (!result.success) this.showError(result.message);
        } catch (err) {
            this.showError(err.message);
        }
        this.selectionChanged();
    }

    render() {
        const { images, selectedIds, search, size, analysis } = this.state;
        const visible = this.visibleImages();
        const hasImages = images.length > 0;

        this.dom.workspace.hidden = !hasImages;
        this.dom.empty.hidden = hasImages || !this.dom.errorBanner.hidden;
        if (!hasImages) return;

        const stats = [`Total images: ${images.length}`];
        if (search) stats.push(`Filtered: ${visible.length}`);
        if (selectedIds.size) stats.push(`Selected: ${selectedIds.size}`);
        this.dom.stats.textContent = stats.join(' · ');
        this.dom.clearSelection.hidden = selectedIds.size === 0;
        this.dom.noResults.hidden = !(search && visible.length === 0);

        renderGallery(this.dom.gallery, visible, selectedIds, size, this.handlers);

        this.dom.sidebar.hidden = selectedIds.size === 0;
        this.dom.workspace.classList.toggle('with-sidebar', selectedIds.size > 0);
        if (selectedIds.size) {
            renderSidebar(this.dom.sidebar, analysis, selectedIds.size, this.handlers);
        }
    }
}

document.addEventListener('DOMContentLoaded', () => {
    const app = new TaggerApp();
    app.render();
});
"""

APP_CSS = """:root{--bg:#0f1115;--fg:#e5e7eb;--muted:#a1a1aa;--card:#111318;--chip:#2a2e37;--brand:#7aa2ff;--danger:#ff5c5c}
*{box-sizing:border-box}body{margin:0;background:var(--bg);color:var(--fg);font:15px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Inter,Ubuntu,Helvetica,Arial}
a{color:var(--brand);text-decoration:none}.muted{color:var(--muted)}[hidden]{display:none !important}
.topbar{position:sticky;top:0;background:#0c0e13;border-bottom:1px solid #1c1f26;z-index:10}
.topbar nav{margin:auto;display:flex;gap:14px;align-items:center;padding:10px}
.topbar .brand{font-weight:700}.topbar .last-scan{margin-left:auto;font-size:13px}
.container{margin:20px auto;padding:0 14px}
button{cursor:pointer;background:#1e2635;border:1px solid #2f3748;color:var(--fg);padding:6px 12px;border-radius:8px}
button.primary,button.active{background:var(--brand);border-color:var(--brand);color:#0c0e13}
button:disabled{opacity:.5;cursor:default}
input{background:#0e1218;border:1px solid #232a39;color:var(--fg);padding:6px 10px;border-radius:8px;width:100%}
input[type=checkbox]{width:auto}
.inline{display:inline-flex;gap:6px;align-items:center}
.scan-form{display:grid;gap:10px;max-width:720px;background:var(--card);border:1px solid #1f2430;border-radius:12px;padding:16px}
.path-input{display:flex;gap:8px}.path-input input{flex:1}.path-input button{flex-shrink:0;width:auto}
.flash{display:flex;justify-content:space-between;align-items:center;background:#13221d;border:1px solid #214d39;padding:10px;border-radius:10px;margin:14px 0}
.flash.error{background:#2d1b1b;border-color:#ef4444;color:#f87171}.flash button{all:unset;cursor:pointer;padding:0 6px}
.loading{text-align:center;margin:40px 0}.spinner{width:36px;height:36px;margin:auto;border:4px solid #2a2e37;border-top-color:var(--brand);border-radius:50%;animation:spin 1s linear infinite}
@keyframes spin{to{transform:rotate(360deg)}}
.empty{text-align:center;margin:60px 0}.empty-icon{font-size:48px}
.workspace{display:grid;grid-template-columns:1fr;gap:20px;margin-top:20px}.workspace.with-sidebar{grid-template-columns:1fr 320px}
.gallery-header{display:flex;flex-direction:column;gap:10px;margin-bottom:14px}
.gallery-controls{display:flex;gap:10px;align-items:center;flex-wrap:wrap}.gallery-controls input{flex:1;min-width:240px}
.size-buttons{display:flex;gap:4px}
.directory-header{display:flex;align-items:baseline;gap:12px;margin:18px 0 8px}.directory-header h3{margin:0;font-size:16px}
.grid{display:grid;gap:14px}.grid.size-small{grid-template-columns:repeat(auto-fill,minmax(160px,1fr))}
.grid.size-medium{grid-template-columns:repeat(auto-fill,minmax(260px,1fr))}.grid.size-large{grid-template-columns:repeat(auto-fill,minmax(420px,1fr))}
.card{position:relative;background:var(--card);border:1px solid #1f2430;border-radius:12px;overflow:hidden;display:flex;flex-direction:column;cursor:pointer}
.card.selected{border-color:var(--brand);box-shadow:0 0 0 2px var(--brand)}
.card .check{position:absolute;top:8px;left:8px;width:22px;height:22px;border-radius:4px;background:rgba(0,0,0,0.7);text-align:center;color:var(--brand)}
.card img{width:100%;height:260px;object-fit:cover;display:block;background:#090a0d}
.size-small .card img{height:160px}.size-large .card img{height:420px}
.card .meta{padding:10px;display:flex;flex-direction:column;gap:8px;cursor:default}
.fn{white-space:nowrap;overflow:hidden;text-overflow:ellipsis}.dims{font-size:12px}
.chips{display:flex;flex-wrap:wrap;gap:6px}
.chip{display:inline-flex;align-items:center;gap:6px;background:var(--chip);border-radius:999px;padding:2px 8px;border:1px solid #313644;color:var(--fg)}
.chip button{all:unset;cursor:pointer;padding:0 4px}.chip.dragging{opacity:.4}.drag-handle{cursor:grab;color:var(--muted);font-size:11px}
.chip.common{border-color:#10b981}.chip.partial{border-style:dashed}
.pill{border-radius:999px;border:1px solid #2d3341;background:#1a1d24;color:var(--fg);padding:2px 8px;cursor:pointer}
.tag-input{width:140px;padding:2px 8px;border-radius:999px}
.sidebar{position:sticky;top:70px;align-self:start;background:var(--card);border:1px solid #1f2430;border-radius:12px;padding:14px;display:flex;flex-direction:column;gap:10px}
.sidebar-header{display:flex;justify-content:space-between;align-items:center}.sidebar-header h3{margin:0}
.sidebar h4{margin:8px 0 0}.selected-count{color:var(--brand);font-weight:600;margin:0}
.modal-overlay{position:fixed;inset:0;background:rgba(0,0,0,0.6);display:flex;align-items:center;justify-content:center;z-index:20}
.modal{background:var(--card);border:1px solid #1f2430;border-radius:12px;width:min(560px,92vw);max-height:80vh;display:flex;flex-direction:column}
.modal-header,.modal-footer{display:flex;justify-content:space-between;align-items:center;padding:12px 16px}
.modal-header h3{margin:0}.modal-body{padding:0 16px;overflow:auto;display:flex;flex-direction:column;gap:10px}
.folder-list{list-style:none;margin:0;padding:0}.folder-list li{padding:6px 8px;border-bottom:1px solid #1f2430;cursor:pointer}
.folder-list li:hover{background:#1a1d24}
.no-results{text-align:center}
@media (max-width:900px){.workspace.with-sidebar{grid-template-columns:1fr}.sidebar{position:static}}
"""


def ensure_assets() -> None:
    """Create templates/static on first run so the app is self-contained."""
    TEMPLATES_DIR.mkdir(parents=True, exist_ok=True)
    STATIC_DIR.mkdir(parents=True, exist_ok=True)
    files = {
        TEMPLATES_DIR / "base.html": BASE_HTML,
        TEMPLATES_DIR / "index.html": INDEX_HTML,
        STATIC_DIR / "app.js": APP_JS,
        STATIC_DIR / "app.css": APP_CSS,
    }
    for p, content in files.items():
        if not p.exists():
            p.write_text(content, encoding="utf-8")
