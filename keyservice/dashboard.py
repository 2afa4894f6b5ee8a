"""Browser dashboard served for every unmatched GET path.

The page is static; all data comes from the JSON API.
"""

DASHBOARD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>API Keys</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; background: #0b0b0c; color: #eee; min-height: 100vh; }
    header { display: flex; justify-content: space-between; align-items: center; padding: 20px 32px; border-bottom: 1px solid #2a2a2e; }
    header h1 { font-size: 20px; }
    main { max-width: 1100px; margin: 0 auto; padding: 32px; }
    button { cursor: pointer; border-radius: 6px; border: 1px solid #3a3a40; background: transparent; color: #bbb; padding: 6px 12px; font-size: 12px; }
    button.primary { background: #e0245e; border-color: #e0245e; color: #fff; padding: 10px 20px; font-size: 14px; font-weight: 600; }
    button.danger:hover { border-color: #e5484d; color: #e5484d; }
    .stats { display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px; margin-bottom: 32px; }
    .stat { background: #141416; border: 1px solid #2a2a2e; border-radius: 10px; padding: 20px; text-align: center; }
    .stat .value { font-size: 28px; font-weight: 700; }
    .stat .label { color: #888; font-size: 13px; margin-top: 4px; }
    .card { background: #141416; border: 1px solid #2a2a2e; border-radius: 10px; padding: 20px; margin-bottom: 16px; }
    .card-head { display: flex; justify-content: space-between; align-items: center; margin-bottom: 12px; }
    .badge { padding: 3px 10px; border-radius: 12px; font-size: 11px; font-weight: 600; text-transform: uppercase; }
    .badge.active { background: #10b98122; color: #10b981; }
    .badge.revoked, .badge.expired { background: #e5484d22; color: #e5484d; }
    .secret { font-family: monospace; background: #0b0b0c; border: 1px solid #2a2a2e; border-radius: 6px; padding: 10px; color: #10b981; margin-bottom: 12px; }
    .meta { display: flex; gap: 20px; flex-wrap: wrap; color: #888; font-size: 13px; }
    .scopes { display: flex; gap: 6px; margin-top: 12px; flex-wrap: wrap; }
    .scope { background: #2979ff22; color: #5b9bff; padding: 3px 8px; border-radius: 4px; font-size: 11px; }
    .actions { display: flex; gap: 8px; margin-top: 12px; padding-top: 12px; border-top: 1px solid #222; }
    .modal { display: none; position: fixed; inset: 0; background: rgba(0,0,0,0.75); align-items: center; justify-content: center; }
    .modal.open { display: flex; }
    .modal-body { background: #141416; border: 1px solid #2a2a2e; border-radius: 10px; padding: 28px; width: 100%; max-width: 480px; }
    .modal-body label { display: block; font-size: 13px; color: #aaa; margin: 14px 0 6px; }
    .modal-body input, .modal-body select { width: 100%; padding: 10px; border-radius: 6px; border: 1px solid #2a2a2e; background: #0b0b0c; color: #eee; }
    .scope-options { display: grid; grid-template-columns: 1fr 1fr; gap: 6px; }
    .scope-options label { margin: 0; display: flex; gap: 6px; align-items: center; }
    .scope-options input { width: auto; }
    .modal-actions { display: flex; justify-content: flex-end; gap: 8px; margin-top: 20px; }
  </style>
</head>
<body>
  <header>
    <h1>API Keys</h1>
    <button class="primary" onclick="openCreate()">Create key</button>
  </header>
  <main>
    <section class="stats" id="stats"></section>
    <section id="keys"></section>
  </main>

  <div class="modal" id="create-modal">
    <div class="modal-body">
      <h2>New API key</h2>
      <label for="key-name">Name</label>
      <input id="key-name" placeholder="Untitled Key">
      <label for="key-env">Environment</label>
      <select id="key-env">
        <option value="live">live</option>
        <option value="test">test</option>
        <option value="ci">ci</option>
      </select>
      <label for="key-rate">Rate limit (requests/hour)</label>
      <input id="key-rate" type="number" value="1000">
      <label>Scopes</label>
      <div class="scope-options" id="scope-options"></div>
      <div class="modal-actions">
        <button onclick="closeCreate()">Cancel</button>
        <button class="primary" onclick="createKey()">Create</button>
      </div>
    </div>
  </div>

  <script>
    const esc = (s) => String(s).replace(/[&<>"']/g, (c) => ({'&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&#39;'}[c]));
    const mask = (k) => k.prefix + '\\u2022'.repeat(8) + k.key.slice(-4);
    const when = (t) => t ? new Date(t).toLocaleString() : 'never';

    async function loadScopes() {
      const resp = await fetch('/api/scopes');
      const data = await resp.json();
      document.getElementById('scope-options').innerHTML = data.scopes.map((s) =>
        `<label title="${esc(s.description)}"><input type="checkbox" name="scope" value="${esc(s.id)}" ${s.id === 'read' ? 'checked' : ''}>${esc(s.name)}</label>`
      ).join('');
    }

    async function loadKeys() {
      const resp = await fetch('/api/keys');
      const data = await resp.json();
      const active = data.keys.filter((k) => k.status === 'active').length;
      const requests = data.keys.reduce((sum, k) => sum + k.usage.requests, 0);
      const lastHour = data.keys.reduce((sum, k) => sum + k.usage.lastHour, 0);
      document.getElementById('stats').innerHTML = [
        [data.keys.length, 'Total keys'], [active, 'Active'],
        [requests.toLocaleString(), 'Total requests'], [lastHour.toLocaleString(), 'Requests last hour'],
      ].map(([v, l]) => `<div class="stat"><div class="value">${v}</div><div class="label">${l}</div></div>`).join('');

      document.getElementById('keys').innerHTML = data.keys.map((k) => `
        <div class="card">
          <div class="card-head">
            <strong>${esc(k.name)}</strong>
            <span class="badge ${esc(k.status)}">${esc(k.status)}</span>
          </div>
          <div class="secret">${esc(mask(k))}</div>
          <div class="meta">
            <span>ID: ${esc(k.id)}</span>
            <span>Created: ${when(k.createdAt)}</span>
            <span>Last used: ${when(k.lastUsed)}</span>
            <span>Expires: ${k.expiresAt ? when(k.expiresAt) : 'never'}</span>
            <span>Rate limit: ${k.rateLimit}/hr</span>
            <span>Requests: ${k.usage.requests.toLocaleString()}</span>
          </div>
          <div class="scopes">${k.scopes.map((s) => `<span class="scope">${esc(s)}</span>`).join('')}</div>
          ${k.status === 'active' ? `
          <div class="actions">
            <button onclick="copyKey('${esc(k.id)}')">Copy</button>
            <button onclick="rotateKey('${esc(k.id)}')">Rotate</button>
            <button class="danger" onclick="revokeKey('${esc(k.id)}')">Revoke</button>
          </div>` : ''}
        </div>`).join('');
    }

    function openCreate() { document.getElementById('create-modal').classList.add('open'); }
    function closeCreate() { document.getElementById('create-modal').classList.remove('open'); }

    async function createKey() {
      const name = document.getElementById('key-name').value || 'Untitled Key';
      const environment = document.getElementById('key-env').value;
      const rateLimit = parseInt(document.getElementById('key-rate').value, 10) || 1000;
      const scopes = Array.from(document.querySelectorAll('input[name="scope"]:checked')).map((cb) => cb.value);
      const resp = await fetch('/api/keys', {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify({name, environment, scopes, rateLimit}),
      });
      const data = await resp.json();
      if (data.key) {
        alert('Key created. Copy it now:\\n\\n' + data.key.key);
        closeCreate();
        loadKeys();
      }
    }

    async function copyKey(id) {
      const resp = await fetch('/api/keys/' + encodeURIComponent(id));
      const data = await resp.json();
      await navigator.clipboard.writeText(data.key.key);
      alert('Key copied to clipboard.');
    }

    async function rotateKey(id) {
      if (!confirm('Rotate this key? The old secret stops working immediately.')) return;
      const resp = await fetch('/api/keys/' + encodeURIComponent(id) + '/rotate', {method: 'POST'});
      const data = await resp.json();
      alert('Key rotated. New key:\\n\\n' + data.key.key);
      loadKeys();
    }

    async function revokeKey(id) {
      if (!confirm('Revoke this key? This cannot be undone.')) return;
      await fetch('/api/keys/' + encodeURIComponent(id), {method: 'DELETE'});
      loadKeys();
    }

    loadScopes();
    loadKeys();
  </script>
</body>
</html>
"""
