"""Output formatters: text summary, JSON, and the Leaflet HTML map."""

import html as html_lib
import json
from pathlib import Path

from travel_map.config import (
    CANADA_GEOJSON_URL,
    LEAFLET_VERSION,
    US_STATE_TOTAL,
    US_STATES_GEOJSON_URL,
    WORLD_GEOJSON_URL,
)
from travel_map.models import RegionStats
from travel_map.normalize.codes import COUNTRY_NAMES, PROVINCE_NAMES, STATE_NAMES


# ---------------------------------------------------------------------------
# Human-readable summary
# ---------------------------------------------------------------------------

def format_summary(stats: RegionStats) -> str:
    s = stats.summary
    lines = []
    lines.append("=" * 60)
    lines.append(f"  {stats.title}")
    lines.append("=" * 60)
    lines.append(f"  States:    {s.states_visited} / {US_STATE_TOTAL} ({s.states_pct}%)")
    lines.append(f"             {s.work_only} work only, {s.personal_only} personal only, "
                 f"{s.both} both, {s.future_only} upcoming")
    lines.append(f"  Provinces: {s.provinces_visited} visited, {s.provinces_future} upcoming")
    lines.append(f"  Countries: {s.countries_visited} visited, {s.countries_future} upcoming")
    if s.top_regions:
        lines.append("")
        lines.append("  Most trips:")
        for r in s.top_regions:
            lines.append(f"    {r['name']:<24} {r['total']}")
    lines.append("=" * 60)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def stats_to_dict(stats: RegionStats) -> dict:
    return stats.to_dict()


def to_json(stats: RegionStats, path: Path):
    """Write the classification result as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(stats_to_dict(stats), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


# ---------------------------------------------------------------------------
# Interactive map
# ---------------------------------------------------------------------------

def _json_for_script(data) -> str:
    """JSON safe to inline inside a <script> element."""
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def render_travel_map_html(stats: RegionStats) -> str:
    """Build the self-contained Leaflet page for a classification result."""
    s = stats.summary
    title = html_lib.escape(stats.title)
    data_json = _json_for_script(stats.to_dict())
    names_json = _json_for_script({
        "state": dict(STATE_NAMES),
        "province": dict(PROVINCE_NAMES),
        "country": dict(COUNTRY_NAMES),
    })

    prov_stat = ""
    if s.provinces_visited:
        plural = "s" if s.provinces_visited > 1 else ""
        prov_stat = f'<span class="stat-prov">{s.provinces_visited} province{plural}</span>'
    country_stat = ""
    if s.countries_visited:
        plural = "ies" if s.countries_visited > 1 else "y"
        country_stat = f'<span class="stat-country">{s.countries_visited} countr{plural}</span>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<link rel="stylesheet" href="https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.css" crossorigin=""/>
<script src="https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.js" crossorigin=""></script>
<style>
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
    background: #16213e;
    padding: 20px;
  }}
  h1 {{ text-align: center; color: #fff; font-size: 2rem; margin-bottom: 14px; }}
  .legend {{ display: flex; justify-content: center; gap: 24px; margin-bottom: 14px; color: #eee; }}
  .swatch {{ display: inline-block; width: 18px; height: 18px; border-radius: 4px; vertical-align: middle; }}
  #map {{ width: 100%; height: 620px; border-radius: 12px 12px 0 0; }}
  .stats {{
    display: flex; justify-content: center; gap: 20px; flex-wrap: wrap;
    padding: 14px; background: #fff; border-radius: 0 0 12px 12px; color: #555;
  }}
  .stat-work {{ color: #ff9800; font-weight: 600; }}
  .stat-personal {{ color: #e91e63; font-weight: 600; }}
  .stat-both {{ color: #9c27b0; font-weight: 600; }}
  .stat-future {{ color: #4caf50; font-weight: 600; }}
  .stat-prov, .stat-country {{ color: #00bcd4; font-weight: 600; }}
  .info-box {{ padding: 10px 14px; background: #fff; border-radius: 8px; font-size: 14px; min-width: 180px; }}
</style>
</head>
<body>
  <h1>{title}</h1>
  <div class="legend">
    <span><span class="swatch" style="background:#ff9800"></span> Work</span>
    <span><span class="swatch" style="background:#e91e63"></span> Personal</span>
    <span><span class="swatch" style="background:#9c27b0"></span> Both</span>
    <span><span class="swatch" style="background:#4caf50"></span> Upcoming</span>
    <span><span class="swatch" style="background:#dfe6e9"></span> Not Yet Visited</span>
  </div>
  <div id="map"></div>
  <div class="stats">
    <span><strong>{s.states_visited}</strong> / {US_STATE_TOTAL} states ({s.states_pct}%)</span>
    <span class="stat-work">{s.work_only} work only</span>
    <span class="stat-personal">{s.personal_only} personal only</span>
    <span class="stat-both">{s.both} both</span>
    <span class="stat-future">{s.future_only} upcoming</span>
    {prov_stat}
    {country_stat}
  </div>

<script>
(function() {{
  var data = {data_json};
  var names = {names_json};
  var maxTrips = Math.max(data.summary.max_trip_count, 1);
  var colors = {{ work: '#ff9800', personal: '#e91e63', both: '#9c27b0', futureOnly: '#4caf50' }};
  var labels = {{ work: 'Work', personal: 'Personal', both: 'Work + Personal', futureOnly: 'Upcoming', unvisited: 'Not visited' }};

  var map = L.map('map', {{ center: [44, -98], zoom: 4, minZoom: 2, maxZoom: 10 }});
  L.tileLayer('https://{{s}}.basemaps.cartocdn.com/light_nolabels/{{z}}/{{x}}/{{y}}{{r}}.png', {{
    attribution: '&copy; OpenStreetMap &copy; CARTO',
    subdomains: 'abcd',
    maxZoom: 20
  }}).addTo(map);

  function region(code) {{ return data.regions[code]; }}

  function style(code) {{
    var r = region(code);
    var category = r ? r.category : 'unvisited';
    var count = r ? r.total_count : 0;
    var fill = colors[category] || '#dfe6e9';
    var opacity = category === 'unvisited' ? 0.7
      : (count > 0 ? 0.5 + (Math.min(count, maxTrips) / maxTrips) * 0.5 : 0.6);
    return {{ fillColor: fill, fillOpacity: opacity, weight: 1, color: '#fff', opacity: 1 }};
  }}

  var info = L.control({{ position: 'topright' }});
  info.onAdd = function() {{
    this._div = L.DomUtil.create('div', 'info-box');
    this.update();
    return this._div;
  }};
  info.update = function(code, kind) {{
    if (!code) {{ this._div.innerHTML = '<strong>Hover over a region</strong>'; return; }}
    var r = region(code);
    var name = (names[kind] && names[kind][code]) || code;
    var div = document.createElement('div');
    var h = document.createElement('strong');
    h.textContent = name;
    div.appendChild(h);
    var status = document.createElement('div');
    status.textContent = labels[r ? r.category : 'unvisited'];
    div.appendChild(status);
    if (r && r.total_count > 0) {{
      var trips = document.createElement('div');
      trips.textContent = r.total_count + (r.total_count === 1 ? ' trip' : ' trips')
        + ' (' + r.work_count + ' work, ' + r.personal_count + ' personal)';
      div.appendChild(trips);
    }}
    this._div.innerHTML = '';
    this._div.appendChild(div);
  }};
  info.addTo(map);

  function addLayer(url, kind, codeOf) {{
    fetch(url).then(function(r) {{ return r.json(); }}).then(function(geo) {{
      var layer = L.geoJson(geo, {{
        style: function(f) {{ return style(codeOf(f)); }},
        onEachFeature: function(f, l) {{
          l.on({{
            mouseover: function() {{ l.setStyle({{ weight: 3, color: '#333' }}); info.update(codeOf(f), kind); }},
            mouseout: function() {{ layer.resetStyle(l); info.update(); }}
          }});
        }}
      }}).addTo(map);
    }});
  }}

  var stateByName = {{}};
  Object.keys(names.state).forEach(function(c) {{ stateByName[names.state[c]] = c; }});
  stateByName['District of Columbia'] = 'DC';

  addLayer('{WORLD_GEOJSON_URL}', 'country', function(f) {{
    return f.properties.ISO_A3 || f.properties['ISO3166-1-Alpha-3'] || '';
  }});
  addLayer('{US_STATES_GEOJSON_URL}', 'state', function(f) {{
    return stateByName[f.properties.name] || '';
  }});
  addLayer('{CANADA_GEOJSON_URL}', 'province', function(f) {{
    var p = f.properties;
    return (p.iso_3166_2 || '').replace('CA-', '') || p.postal || '';
  }});
}})();
</script>
</body>
</html>"""


def format_travel_map_html(stats: RegionStats, path: Path):
    """Write the interactive map as a single HTML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_travel_map_html(stats), encoding="utf-8")
