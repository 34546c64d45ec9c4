"""Signature form page with live preview and accent hue slider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from colors import DEFAULT_ACCENT_COLOR, GRADIENT_SHADE, hex_to_rgba, hsl_to_hex, shade_hex_color
from config import Settings
from signature import esc

ACCENT_SATURATION = 72
ACCENT_LIGHTNESS = 58


@dataclass(frozen=True)
class FormDefaults:
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    logo_url: str = ""
    linkedin_url: str = ""
    accent_hue: int = 229

    @property
    def accent_color(self) -> str:
        return hsl_to_hex(self.accent_hue, ACCENT_SATURATION, ACCENT_LIGHTNESS)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FormDefaults":
        return cls(
            name=settings.DEFAULT_NAME,
            title=settings.DEFAULT_TITLE,
            email=settings.DEFAULT_EMAIL,
            phone=settings.DEFAULT_PHONE,
            website=settings.DEFAULT_WEBSITE,
            logo_url=settings.DEFAULT_LOGO_URL,
            linkedin_url=settings.DEFAULT_LINKEDIN_URL,
            accent_hue=settings.DEFAULT_ACCENT_HUE,
        )


# Client-side copy of colors.py for the hue slider.
_SCRIPT_SOURCE = """
  const form = document.getElementById('sig-form');
  const iframe = document.getElementById('preview');
  const accentHueInput = document.getElementById('accentHue');
  const accentColorInput = document.getElementById('accentColor');
  const accentSwatch = document.getElementById('accentColorSwatch');
  const accentValue = document.getElementById('accentColorValue');
  const rootStyle = document.documentElement ? document.documentElement.style : null;
  const FALLBACK_ACCENT = document.body.dataset.fallbackAccent;

  function normalizeHex(hex) {
    if (typeof hex !== 'string') {
      return FALLBACK_ACCENT;
    }
    const match = hex.trim().match(/^#?([0-9a-f]{3}|[0-9a-f]{6})$/i);
    if (!match) {
      return FALLBACK_ACCENT;
    }
    let value = match[1];
    if (value.length === 3) {
      value = value.split('').map(ch => ch + ch).join('');
    }
    return '#' + value.toLowerCase();
  }

  function toHex(n) {
    return Math.max(0, Math.min(255, Math.round(n))).toString(16).padStart(2, '0');
  }

  function hslToHex(h, s, l) {
    const hue = ((h % 360) + 360) % 360;
    const saturation = Math.max(0, Math.min(100, s)) / 100;
    const lightness = Math.max(0, Math.min(100, l)) / 100;
    const k = n => (n + hue / 30) % 12;
    const a = saturation * Math.min(lightness, 1 - lightness);
    const f = n => lightness - a * Math.max(-1, Math.min(Math.min(k(n) - 3, 9 - k(n)), 1));
    const channel = n => toHex(Math.max(0, Math.min(1, f(n))) * 255);
    return '#' + channel(0) + channel(8) + channel(4);
  }

  function hexToRgb(hex) {
    const value = normalizeHex(hex).slice(1);
    return {
      r: parseInt(value.substring(0, 2), 16),
      g: parseInt(value.substring(2, 4), 16),
      b: parseInt(value.substring(4, 6), 16),
    };
  }

  function mixHex(base, mix, weight) {
    const w = Math.max(0, Math.min(1, weight));
    const b = hexToRgb(base);
    const m = hexToRgb(mix);
    return '#' + toHex(b.r * (1 - w) + m.r * w) + toHex(b.g * (1 - w) + m.g * w) + toHex(b.b * (1 - w) + m.b * w);
  }

  function shadeHex(hex, amount) {
    if (amount === 0) {
      return normalizeHex(hex);
    }
    if (amount > 0) {
      return mixHex(hex, '#ffffff', Math.min(1, amount));
    }
    return mixHex(hex, '#000000', Math.min(1, Math.abs(amount)));
  }

  function hexToRgba(hex, alpha) {
    const { r, g, b } = hexToRgb(hex);
    return 'rgba(' + r + ', ' + g + ', ' + b + ', ' + Math.max(0, Math.min(1, alpha)) + ')';
  }

  function syncAccentColor() {
    if (!accentHueInput || !accentColorInput || !rootStyle) {
      return;
    }
    const hue = Number(accentHueInput.value || 0);
    const baseHex = hslToHex(hue, __SATURATION__, __LIGHTNESS__);
    const sliderGradient = 'linear-gradient(90deg, hsl(' + hue + ', 80%, 45%) 0%, hsl(' + hue + ', 80%, 60%) 50%, hsl(' + hue + ', 80%, 75%) 100%)';

    accentColorInput.value = baseHex;
    if (accentSwatch) {
      accentSwatch.style.background = baseHex;
    }
    if (accentValue) {
      accentValue.textContent = baseHex.toUpperCase();
    }
    rootStyle.setProperty('--accent-color', baseHex);
    rootStyle.setProperty('--accent-gradient-from', shadeHex(baseHex, -__SHADE__));
    rootStyle.setProperty('--accent-gradient-to', shadeHex(baseHex, __SHADE__));
    rootStyle.setProperty('--accent-shadow-color', hexToRgba(baseHex, 0.25));
    rootStyle.setProperty('--accent-slider-gradient', sliderGradient);
  }

  function updatePreview() {
    if (!form || !iframe) {
      return;
    }
    syncAccentColor();
    const body = new URLSearchParams(new FormData(form)).toString();
    fetch('/preview', {
      method: 'POST',
      headers: { 'Content-Type': 'application/x-www-form-urlencoded' },
      body: body,
    })
      .then(r => r.text())
      .then(html => {
        const doc = iframe.contentDocument || iframe.contentWindow.document;
        doc.open();
        doc.write(html);
        doc.close();
      })
      .catch(err => console.error('[preview] error', err));
  }

  if (form) {
    form.addEventListener('input', updatePreview);
  }
  window.addEventListener('DOMContentLoaded', updatePreview);
"""
FORM_SCRIPT = (
    _SCRIPT_SOURCE.replace("__SATURATION__", str(ACCENT_SATURATION))
    .replace("__LIGHTNESS__", str(ACCENT_LIGHTNESS))
    .replace("__SHADE__", str(GRADIENT_SHADE))
)


def render_input(field: str, label: str, value: str, placeholder: str, required: bool = False, kind: str = "text") -> str:
    marker = " *" if required else ""
    req = " required" if required else ""
    return (
        '<div class="form-group">'
        f'<label for="{field}">{esc(label)}{marker}</label>'
        f'<input id="{field}" name="{field}" type="{kind}" value="{esc(value)}"{req} placeholder="{esc(placeholder)}" />'
        "</div>"
    )


def render_form_page(defaults: Optional[FormDefaults] = None) -> str:
    defaults = defaults or FormDefaults()
    accent = defaults.accent_color
    gradient_from = shade_hex_color(accent, -GRADIENT_SHADE)
    gradient_to = shade_hex_color(accent, GRADIENT_SHADE)
    shadow = hex_to_rgba(accent, 0.25)

    inputs = "\n".join(
        [
            render_input("name", "Full Name", defaults.name, "Enter your full name", required=True),
            render_input("title", "Job Title", defaults.title, "Enter your job title", required=True),
            render_input("email", "Email Address", defaults.email, "your.email@company.com", required=True, kind="email"),
            render_input("phone", "Phone Number", defaults.phone, "+1 (555) 123-4567"),
            render_input("website", "Website", defaults.website, "www.yourcompany.com"),
            render_input("logoUrl", "Logo URL", defaults.logo_url, "https://example.com/logo.png", required=True),
            render_input("linkedinUrl", "LinkedIn Profile", defaults.linkedin_url, "https://linkedin.com/in/yourprofile"),
        ]
    )

    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Email Signature Generator</title>
  <style>
    :root {{
      --accent-color: {accent};
      --accent-gradient-from: {gradient_from};
      --accent-gradient-to: {gradient_to};
      --accent-shadow-color: {shadow};
      --accent-slider-gradient: linear-gradient(90deg, {gradient_from} 0%, {accent} 50%, {gradient_to} 100%);
    }}
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif; background: linear-gradient(135deg, var(--accent-gradient-from) 0%, var(--accent-gradient-to) 100%); min-height: 100vh; color: #333; line-height: 1.6; }}
    .container {{ max-width: 1200px; margin: 0 auto; padding: 2rem; }}
    .header {{ text-align: center; margin-bottom: 3rem; color: white; }}
    .header h1 {{ font-size: 2.5rem; font-weight: 700; margin-bottom: 0.5rem; text-shadow: 0 2px 4px rgba(0,0,0,0.1); }}
    .header p {{ font-size: 1.1rem; opacity: 0.9; font-weight: 300; }}
    .main-content {{ display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; align-items: start; }}
    .form-card, .preview-card {{ background: white; border-radius: 16px; padding: 2rem; box-shadow: 0 20px 40px rgba(0,0,0,0.1); }}
    .form-group {{ margin-bottom: 1.5rem; }}
    .form-group label {{ display: block; font-weight: 600; color: #374151; margin-bottom: 0.5rem; font-size: 0.9rem; text-transform: uppercase; letter-spacing: 0.5px; }}
    .form-group input {{ width: 100%; padding: 0.875rem 1rem; border: 2px solid #e5e7eb; border-radius: 8px; font-size: 1rem; transition: all 0.2s ease; background: #fafafa; }}
    .form-group input:focus {{ outline: none; border-color: var(--accent-color); background: white; box-shadow: 0 0 0 3px var(--accent-shadow-color); }}
    .form-group input:required {{ border-left: 4px solid var(--accent-color); }}
    .color-slider {{ display: flex; flex-direction: column; gap: 0.75rem; }}
    .color-slider input[type="range"] {{ -webkit-appearance: none; appearance: none; width: 100%; height: 12px; border-radius: 999px; background: var(--accent-slider-gradient); outline: none; cursor: pointer; padding: 0; border: 0; }}
    .color-slider input[type="range"]::-webkit-slider-thumb {{ -webkit-appearance: none; appearance: none; width: 20px; height: 20px; border-radius: 50%; background: var(--accent-color); border: 3px solid white; box-shadow: 0 4px 10px rgba(0,0,0,0.2); }}
    .color-slider input[type="range"]::-moz-range-thumb {{ width: 20px; height: 20px; border-radius: 50%; background: var(--accent-color); border: 3px solid white; box-shadow: 0 4px 10px rgba(0,0,0,0.2); }}
    .color-slider__meta {{ display: flex; align-items: center; justify-content: space-between; gap: 0.75rem; }}
    .color-slider__swatch {{ width: 40px; height: 40px; border-radius: 12px; border: 2px solid rgba(255,255,255,0.6); box-shadow: 0 8px 16px rgba(0,0,0,0.15); background: var(--accent-color); }}
    .color-slider__value {{ font-size: 0.85rem; font-weight: 600; color: #374151; letter-spacing: 0.5px; }}
    .submit-btn {{ background: linear-gradient(135deg, var(--accent-gradient-from) 0%, var(--accent-gradient-to) 100%); color: white; border: none; padding: 1rem 2rem; border-radius: 8px; font-size: 1rem; font-weight: 600; cursor: pointer; width: 100%; text-transform: uppercase; letter-spacing: 0.5px; box-shadow: 0 4px 15px var(--accent-shadow-color); }}
    .submit-btn:hover {{ transform: translateY(-2px); box-shadow: 0 8px 25px var(--accent-shadow-color); }}
    .preview-header {{ display: flex; align-items: center; margin-bottom: 1rem; }}
    .preview-header h3 {{ font-size: 1.25rem; font-weight: 600; color: #374151; margin-left: 0.5rem; }}
    .preview-icon {{ width: 24px; height: 24px; background: linear-gradient(135deg, var(--accent-gradient-from) 0%, var(--accent-gradient-to) 100%); border-radius: 6px; }}
    .preview-frame {{ width: 100%; height: 400px; border: 2px solid #e5e7eb; border-radius: 8px; background: #f9fafb; overflow: hidden; }}
    .preview-frame iframe {{ width: 100%; height: 100%; border: none; background: white; }}
    .info-text {{ margin-top: 2rem; text-align: center; color: rgba(255, 255, 255, 0.8); font-size: 0.9rem; background: rgba(255, 255, 255, 0.1); padding: 1rem; border-radius: 8px; }}
    .info-text strong {{ color: white; font-weight: 600; }}
    @media (max-width: 768px) {{
      .container {{ padding: 1rem; }}
      .header h1 {{ font-size: 2rem; }}
      .main-content {{ grid-template-columns: 1fr; gap: 1.5rem; }}
      .form-card, .preview-card {{ padding: 1.5rem; }}
    }}
  </style>
</head>
<body data-fallback-accent="{DEFAULT_ACCENT_COLOR}">
  <div class="container">
    <div class="header">
      <h1>Email Signature Generator</h1>
      <p>Create professional email signatures in seconds</p>
    </div>
    <div class="main-content">
      <div class="form-card">
        <form id="sig-form" method="POST" action="/generate">
          {inputs}
          <div class="form-group">
            <label for="accentHue">Accent Color</label>
            <div class="color-slider">
              <input id="accentHue" name="accentHue" type="range" min="0" max="360" value="{defaults.accent_hue}" aria-label="Select accent color hue" />
              <div class="color-slider__meta">
                <div class="color-slider__swatch" id="accentColorSwatch" aria-hidden="true"></div>
                <span class="color-slider__value" id="accentColorValue">{accent.upper()}</span>
              </div>
              <input id="accentColor" name="accentColor" type="hidden" value="{accent}" />
            </div>
          </div>
          <button type="submit" class="submit-btn">Generate Signature</button>
        </form>
      </div>
      <div class="preview-card">
        <div class="preview-header">
          <div class="preview-icon"></div>
          <h3>Live Preview</h3>
        </div>
        <div class="preview-frame">
          <iframe id="preview" title="Signature Preview"></iframe>
        </div>
      </div>
    </div>
    <div class="info-text">
      <p>Submitting will download a file named <strong>signature.html</strong> that you can use in your email client.</p>
    </div>
  </div>
  <script>{FORM_SCRIPT}</script>
</body>
</html>
"""
