#!/usr/bin/env python3
"""Email signature generator: turn a contact record into table-based HTML."""

from __future__ import annotations

import argparse
import html
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from colors import derive_palette

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["name", "title", "email", "logoUrl"]
FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif"
TABLE_ATTRS = 'role="presentation" cellpadding="0" cellspacing="0" border="0"'
TABLE_STYLE = f"border-collapse:collapse; mso-table-lspace:0pt; mso-table-rspace:0pt; font-family:{FONT_STACK};"
ROW_STYLE = f"font-family:{FONT_STACK}; color:#374151; font-size:13px; line-height:18px;"
LINKEDIN_LABEL = "LinkedIn Profile"

ICONS = {
    "email": "\U0001F4E7",
    "phone": "\U0001F4DE",
    "website": "\U0001F310",
    "linkedin": "\U0001F4BC",
}


def esc(value: str) -> str:
    return html.escape(value, quote=True)


def _optional(value: object) -> Optional[str]:
    if not value:
        return None
    return str(value)


@dataclass
class SignatureData:
    name: str
    title: str
    email: str
    logo_url: str
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin_url: Optional[str] = None
    accent_color: Optional[str] = None

    @classmethod
    def from_form(cls, form: Mapping[str, object]) -> "SignatureData":
        """Build a record from parsed form fields, ignoring unknown keys."""
        return cls(
            name=str(form.get("name") or ""),
            title=str(form.get("title") or ""),
            email=str(form.get("email") or ""),
            logo_url=str(form.get("logoUrl") or ""),
            phone=_optional(form.get("phone")),
            website=_optional(form.get("website")),
            linkedin_url=_optional(form.get("linkedinUrl")),
            accent_color=_optional(form.get("accentColor")),
        )

    def missing_fields(self) -> List[str]:
        values = {"name": self.name, "title": self.title, "email": self.email, "logoUrl": self.logo_url}
        return [key for key in REQUIRED_FIELDS if not values[key]]


@dataclass(frozen=True)
class ContactRow:
    kind: str
    href: str
    label: str

    @property
    def icon(self) -> str:
        return ICONS[self.kind]


def phone_href(phone: str) -> str:
    return "tel:" + re.sub(r"[^0-9+]", "", phone)


def website_href(website: str) -> str:
    if website.startswith("http://") or website.startswith("https://"):
        return website
    return "https://" + website


def contact_rows(data: SignatureData) -> List[ContactRow]:
    """Rows for every present contact field, email first and LinkedIn last."""
    email = esc(data.email)
    rows = [ContactRow("email", f"mailto:{email}", email)]
    if data.phone:
        phone = esc(data.phone)
        rows.append(ContactRow("phone", phone_href(phone), phone))
    if data.website:
        website = esc(data.website)
        rows.append(ContactRow("website", website_href(website), website))
    if data.linkedin_url:
        rows.append(ContactRow("linkedin", esc(data.linkedin_url), LINKEDIN_LABEL))
    return rows


def render_contact_row(row: ContactRow, accent: str, padded: bool = True) -> str:
    padding = " padding:3px 0;" if padded else ""
    return (
        "<tr>"
        f'<td style="{ROW_STYLE}{padding}">'
        f'<span style="color:#9ca3af; font-weight:500;">{row.icon}</span> '
        f'<a href="{row.href}" style="color:{accent}; text-decoration:none; font-weight:500; margin-left:6px;">{row.label}</a>'
        "</td>"
        "</tr>"
    )


def render_row_table(rows: List[ContactRow], accent: str, padded: bool = True) -> str:
    body = "".join(render_contact_row(row, accent, padded) for row in rows)
    return (
        "<tr>"
        '<td style="padding-top:12px;">'
        f'<table {TABLE_ATTRS} style="{TABLE_STYLE}">{body}</table>'
        "</td>"
        "</tr>"
    )


def generate_signature_html(data: SignatureData) -> str:
    name = esc(data.name)
    title = esc(data.title)
    logo_url = esc(data.logo_url)
    palette = derive_palette(data.accent_color)

    rows = contact_rows(data)
    contact = [row for row in rows if row.kind != "linkedin"]
    linkedin = [row for row in rows if row.kind == "linkedin"]
    sections = render_row_table(contact, palette.accent)
    if linkedin:
        sections += render_row_table(linkedin, palette.accent, padded=False)

    logger.debug("rendering signature rows=%s accent=%s", [row.kind for row in rows], palette.accent)

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta http-equiv="x-ua-compatible" content="ie=edge" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <meta charset="utf-8" />
    <title>Email Signature</title>
  </head>
  <body style="margin:0; padding:0; background-color:#ffffff;">
    <table {TABLE_ATTRS} style="{TABLE_STYLE} width:100%;">
      <tr>
        <td style="padding:16px;">
          <table {TABLE_ATTRS} style="{TABLE_STYLE} width:100%; max-width:600px;">
            <tr>
              <td valign="middle" style="padding:0 20px 0 0;">
                <img src="{logo_url}" alt="Company Logo" width="80" height="80" style="display:block; width:80px; height:80px; border:0; outline:none; text-decoration:none; border-radius:8px; box-shadow:0 2px 8px rgba(0,0,0,0.1);" />
              </td>
              <td style="width:1px; background:linear-gradient(135deg, {palette.gradient_from} 0%, {palette.gradient_to} 100%); line-height:1px; font-size:1px;">&nbsp;</td>
              <td valign="top" style="padding:0 0 0 20px; font-family:{FONT_STACK};">
                <table {TABLE_ATTRS} style="{TABLE_STYLE}">
                  <tr>
                    <td style="font-family:{FONT_STACK}; color:#1f2937; font-size:18px; line-height:24px; font-weight:700; letter-spacing:-0.025em;">
                      {name}
                    </td>
                  </tr>
                  <tr>
                    <td style="font-family:{FONT_STACK}; color:#6b7280; font-size:14px; line-height:20px; padding-top:4px; font-weight:500;">
                      {title}
                    </td>
                  </tr>
                  {sections}
                </table>
              </td>
            </tr>
          </table>
        </td>
      </tr>
    </table>
  </body>
</html>
"""


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate an HTML email signature")
    ap.add_argument("--name", required=True, help="Full name")
    ap.add_argument("--title", required=True, help="Job title")
    ap.add_argument("--email", required=True, help="Email address")
    ap.add_argument("--logo-url", required=True, help="Logo image URL")
    ap.add_argument("--phone", help="Phone number")
    ap.add_argument("--website", help="Website, https:// is added when no scheme is given")
    ap.add_argument("--linkedin-url", help="LinkedIn profile URL")
    ap.add_argument("--accent-color", help="Accent color as #rgb or #rrggbb")
    ap.add_argument("-o", "--output", default="signature.html", help="Output HTML file path")
    args = ap.parse_args(argv)

    data = SignatureData(
        name=args.name,
        title=args.title,
        email=args.email,
        logo_url=args.logo_url,
        phone=args.phone,
        website=args.website,
        linkedin_url=args.linkedin_url,
        accent_color=args.accent_color,
    )
    Path(args.output).write_text(generate_signature_html(data), encoding="utf-8")
    print(f"Signature written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
