"""
Custom CSS styles for ServiGO.
Light theme with the blue-to-purple brand gradient.
"""
import html

import streamlit as st

from ..i18n import DocumentAttributes


# Color palette
COLORS = {
    "primary": "#2563EB",       # Brand blue
    "primary_hover": "#1D4ED8",
    "accent": "#9333EA",        # Brand purple
    "background": "#F8FAFC",
    "surface": "#FFFFFF",
    "surface_hover": "#F1F5F9",
    "text": "#0F172A",
    "text_muted": "#64748B",
    "success": "#16A34A",
    "warning": "#F59E0B",
    "error": "#DC2626",
    "border": "#E2E8F0",
    "flag_red": "#E31B23",      # Tunisian flag
}


def inject_custom_css(document: DocumentAttributes):
    """
    Inject custom CSS into the Streamlit app.
    The document direction and language follow the active locale.
    """
    direction = "rtl" if document.dir == "rtl" else "ltr"
    align = "right" if direction == "rtl" else "left"
    lang = html.escape(document.lang)

    st.markdown(f"""
    <style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&family=Cairo:wght@400;600;700&display=swap');

    :root {{
        --primary: {COLORS['primary']};
        --primary-hover: {COLORS['primary_hover']};
        --accent: {COLORS['accent']};
        --bg: {COLORS['background']};
        --surface: {COLORS['surface']};
        --surface-hover: {COLORS['surface_hover']};
        --text: {COLORS['text']};
        --text-muted: {COLORS['text_muted']};
        --success: {COLORS['success']};
        --warning: {COLORS['warning']};
        --error: {COLORS['error']};
        --border: {COLORS['border']};
        --flag-red: {COLORS['flag_red']};
    }}

    .stApp {{
        font-family: {"'Cairo', " if direction == "rtl" else ""}'Inter', -apple-system, sans-serif;
        background: linear-gradient(135deg, var(--bg) 0%, #FFFFFF 50%, #EFF6FF 100%);
    }}

    .stApp .main, .stApp [data-testid="stSidebar"] {{
        direction: {direction};
        text-align: {align};
    }}

    /* Hero */
    .hero {{
        text-align: center;
        padding: 2.5rem 0 1.5rem;
    }}

    .hero .badge {{
        display: inline-block;
        padding: 0.35rem 1rem;
        border-radius: 999px;
        background: rgba(37, 99, 235, 0.08);
        color: var(--primary);
        font-weight: 600;
        font-size: 0.85rem;
        margin-bottom: 1rem;
    }}

    .hero h1 {{
        font-size: 2.6rem;
        font-weight: 700;
        background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        margin-bottom: 0.5rem;
    }}

    .hero .subtitle {{
        color: var(--text-muted);
        font-size: 1.15rem;
    }}

    .feature-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 16px;
        padding: 1.25rem;
        height: 100%;
    }}

    .feature-card .feature-title {{
        font-weight: 600;
        color: var(--text);
        margin-bottom: 0.35rem;
    }}

    .feature-card .feature-desc {{
        color: var(--text-muted);
        font-size: 0.9rem;
    }}

    .trust-row {{
        display: flex;
        justify-content: center;
        flex-wrap: wrap;
        gap: 1.5rem;
        color: var(--text-muted);
        font-size: 0.9rem;
        margin: 1rem 0 2rem;
    }}

    /* Service cards */
    .service-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 18px;
        overflow: hidden;
        margin-bottom: 1rem;
        transition: all 0.2s ease;
    }}

    .service-card:hover {{
        border-color: var(--primary);
        transform: translateY(-4px);
        box-shadow: 0 12px 30px rgba(37, 99, 235, 0.12);
    }}

    .service-card .photo {{
        height: 160px;
        background: linear-gradient(135deg, rgba(37, 99, 235, 0.12), rgba(147, 51, 234, 0.12));
        background-size: cover;
        background-position: center;
        position: relative;
    }}

    .service-card .type-badge {{
        position: absolute;
        top: 0.75rem;
        {"left" if direction == "rtl" else "right"}: 0.75rem;
        padding: 0.2rem 0.6rem;
        border-radius: 999px;
        color: white;
        font-size: 0.75rem;
        font-weight: 600;
    }}

    .type-onsite {{ background: linear-gradient(135deg, #A855F7, #9333EA); }}
    .type-online {{ background: linear-gradient(135deg, #3B82F6, #2563EB); }}

    .service-card .body {{
        padding: 1rem 1.25rem 1.25rem;
    }}

    .service-card .title {{
        font-size: 1.05rem;
        font-weight: 600;
        color: var(--text);
    }}

    .service-card .business {{
        color: var(--primary);
        font-size: 0.85rem;
    }}

    .service-card .description {{
        color: var(--text-muted);
        font-size: 0.85rem;
        margin: 0.5rem 0;
        line-height: 1.4;
    }}

    .service-card .meta {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        font-size: 0.85rem;
        color: var(--text-muted);
    }}

    .service-card .price {{
        font-weight: 700;
        color: var(--primary);
    }}

    .rating {{
        color: var(--warning);
        font-weight: 600;
    }}

    .verified-tag {{
        color: var(--success);
        font-size: 0.8rem;
        font-weight: 600;
    }}

    /* Governorate picker */
    .state-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 14px;
        padding: 0.75rem;
        text-align: center;
        font-weight: 600;
    }}

    .state-card .flag {{
        display: inline-block;
        width: 36px;
        height: 24px;
        border-radius: 4px;
        background: var(--flag-red);
        position: relative;
        margin-bottom: 0.35rem;
    }}

    .state-card .flag::after {{
        content: "☪";
        color: white;
        position: absolute;
        top: 50%;
        left: 50%;
        transform: translate(-50%, -52%);
        font-size: 0.9rem;
    }}

    /* Provider page */
    .provider-header {{
        display: flex;
        align-items: center;
        gap: 1.25rem;
        margin-bottom: 1rem;
    }}

    .provider-header img {{
        width: 96px;
        height: 96px;
        border-radius: 50%;
        object-fit: cover;
    }}

    .review-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 12px;
        padding: 0.9rem 1rem;
        margin-bottom: 0.75rem;
    }}

    /* Hide Streamlit branding */
    #MainMenu {{visibility: hidden;}}
    footer {{visibility: hidden;}}
    </style>
    <div id="servigo-document" dir="{direction}" lang="{lang}"></div>
    """, unsafe_allow_html=True)
