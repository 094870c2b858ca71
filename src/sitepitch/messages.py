# src/sitepitch/messages.py
"""Report copy per locale.

Wording is product copy: the synthesizer only relies on the keys. "no" is
the original Norwegian sales copy; "en" is its English counterpart.
"""

from sitepitch.rules import supported_locales

MESSAGES = {
    "no": {
        "placeholder_keyword": "deres tjeneste",
        "contrast_class": 'klasse: {token} (i "{snippet}...")',
        "contrast_color": "fargekode: {value}",
        "score_labels": {"high": "høy", "medium": "middels", "weak": "svak"},
        "header": "Din side ({target})\nhar fått en SEO-score på\n{score} / 100 ({label})",
        "secondary_scores": "AI-synlighet: {ai} / 100\nUniversell utforming: {accessibility} / 100",
        "ranking": {
            "heading": (
                "Realistisk rangering i Google for nettstedet "
                "(basert på innholdet på siden, ikke faktiske målinger)"
            ),
            "columns": "Søkeord\tForventet synlighet\tHvorfor",
            "expected": {"high": "Middels–god", "medium": "Middels–svak", "weak": "Svak"},
            "rows": (
                ("{keyword} i ditt område", "local"),
                ("{keyword} pris", "price"),
                ("beste {keyword}", "best"),
            ),
            "why": {
                "local_weak": "lite forklarende innhold og manglende strukturert data",
                "local_high": "mangler fortsatt tydelig faglig dybde sammenlignet med toppaktørene",
                "price": "ingen tydelig seksjon som svarer på pris og hva som er inkludert",
                "best": "lite innhold som bygger faglig tyngde, anmeldelser eller kundehistorier",
            },
            "closing": (
                "Nettsiden rangerer trolig svakere enn den kunne på bransjesøk som for eksempel "
                '"{keyword} i ditt område", "beste {keyword}" og "{keyword} pris".'
            ),
        },
        "problems_heading": "Hvorfor {target} scorer dårlig i Google\n\nDe største problemene",
        "no_issues": (
            "Den automatiske sjekken fant ingen store problemer på denne siden. "
            "En manuell gjennomgang kan likevel avdekke forbedringer."
        ),
        "findings": {
            "discoverability": {
                "title": "Dårlig SEO – Google forstår ikke innholdet",
                "impacts": (
                    "Lavere synlighet i Google på viktige bransjesøk.",
                    "Kunder vil i mindre grad finne dere når de søker etter det dere faktisk tilbyr.",
                ),
            },
            "accessibility": {
                "title": "Brudd på UU-krav (universell utforming) – indikasjoner",
                "impacts": (
                    "Noen brukere vil ha problemer med å lese innholdet.",
                    "Gir risiko for klager/pålegg og svekket inntrykk av profesjonalitet.",
                ),
            },
            "page_weight": {
                "title": "Lav PageSpeed – treg side (indikasjon)",
                "impacts": (
                    "Kunder mister tålmodigheten hvis siden oppleves treg, spesielt på mobil.",
                    "Google prioriterer raske sider, så treghet kan gi færre klikk og henvendelser.",
                ),
            },
            "thin_content": {
                "title": "Kunder får ikke med seg viktig innhold",
                "impacts": (
                    "Tapte salgspunkter – budskapene deres kommer ikke tydelig nok frem.",
                    "Færre tar kontakt enn dere kunne hatt med tydeligere og mer lesbart innhold.",
                ),
            },
            "ai_visibility": {
                "title": "Ingen FAQ eller LLM-optimalisering (AEO)",
                "impacts": (
                    "Nettsiden dukker i liten grad opp i AI-genererte svar (ChatGPT, Bing, Google AI).",
                    "Konkurrenter som har FAQ og strukturert data får et forsprang i nye søkekanaler.",
                ),
            },
            "navigation": {
                "title": "Uklar navigasjon og struktur",
                "impacts": (
                    "Besøkende finner ikke raskt frem til det de leter etter.",
                    "Google får færre interne lenker å følge, og forstår strukturen dårligere.",
                ),
            },
        },
        "evidence": {
            "no_schema": "Mangler strukturert data (schema.org).",
            "low_text": "Lite forklarende tekst (ca. {count} tegn synlig tekst).",
            "no_service_headings": (
                "Få tydelige tjeneste-overskrifter som treffer søkeord målgruppen bruker."
            ),
            "contrast_high": "Svak kontrast: mange lyse/bleke tekster som kan være vanskelig å lese.",
            "contrast_medium": "Noe risiko for svak kontrast, med flere lyse tekststiler.",
            "contrast_examples": "Eksempler på potensielt problematiske tekststiler:",
            "contrast_example": "- {example}",
            "heavy_page": "Mye innhold lastes på én side, noe som kan gjøre siden tung på mobil.",
            "thin_text": (
                "Lite overordnet innhold som forklarer hvem dere er, hva dere gjør "
                "og hvorfor kunden skal velge dere."
            ),
            "no_service_sections": "Mangler tydelige seksjoner som løfter frem de viktigste tjenestene.",
            "contrast_readability": "Lesbarheten påvirkes av svak kontrast enkelte steder.",
            "no_faq": "Ingen FAQ eller tydelig spørsmål/svar-seksjon som kan brukes i AI-svar.",
            "no_schema_ai": (
                "Ingen strukturert data som gjør det lett for AI-tjenester å forstå "
                "hvem dere er og hva dere tilbyr."
            ),
            "no_nav": "Fant ingen tydelig navigasjonsmeny på siden.",
            "few_links": "Få lenker videre til andre sider (kun {count}).",
        },
        "summary_heading": "Hva vi fant",
        "summary_intro": "Dette nettstedet har flere svakheter som påvirker:",
        "summary_intro_clean": "En grundigere gjennomgang kan likevel styrke:",
        "summary_points": (
            "synlighet i Google",
            "brukeropplevelse",
            "troverdighet",
            "konverteringer (hvor mange som faktisk tar kontakt)",
            "risiko for brudd på norsk tilgjengelighetslov (UU)",
        ),
        "pitch_heading": "Hvordan vi kan hjelpe deg",
        "pitch_intro": "Vi leverer:",
        "pitch_points": (
            "Raskere sider",
            "Bedre SEO",
            "Bedre universell utforming (UU)",
            "Strukturert data + AI-optimalisering",
            "Bedre konvertering og mer profesjonell presentasjon",
        ),
    },
    "en": {
        "placeholder_keyword": "your service",
        "contrast_class": 'class: {token} (in "{snippet}...")',
        "contrast_color": "colour code: {value}",
        "score_labels": {"high": "high", "medium": "medium", "weak": "weak"},
        "header": "Your page ({target})\nhas an SEO score of\n{score} / 100 ({label})",
        "secondary_scores": "AI visibility: {ai} / 100\nAccessibility: {accessibility} / 100",
        "ranking": {
            "heading": (
                "Realistic Google ranking for the site "
                "(estimated from the page content, not actual measurements)"
            ),
            "columns": "Search term\tExpected visibility\tWhy",
            "expected": {"high": "Medium–good", "medium": "Medium–weak", "weak": "Weak"},
            "rows": (
                ("{keyword} in your area", "local"),
                ("{keyword} price", "price"),
                ("best {keyword}", "best"),
            ),
            "why": {
                "local_weak": "little explanatory content and no structured data",
                "local_high": "still lacks clear expertise compared with the top competitors",
                "price": "no clear section answering price and what is included",
                "best": "little content building authority, reviews or customer stories",
            },
            "closing": (
                "The site probably ranks lower than it could for industry searches such as "
                '"{keyword} in your area", "best {keyword}" and "{keyword} price".'
            ),
        },
        "problems_heading": "Why {target} scores poorly in Google\n\nThe biggest problems",
        "no_issues": (
            "The automated check found no major issues on this page. "
            "A manual review may still reveal improvements."
        ),
        "findings": {
            "discoverability": {
                "title": "Weak discoverability – Google does not understand the content",
                "impacts": (
                    "Lower visibility in Google for important industry searches.",
                    "Customers are less likely to find you when searching for what you actually offer.",
                ),
            },
            "accessibility": {
                "title": "Accessibility risk – indications",
                "impacts": (
                    "Some users will struggle to read the content.",
                    "Risk of complaints or orders, and a less professional impression.",
                ),
            },
            "page_weight": {
                "title": "Low PageSpeed – heavy page (indication)",
                "impacts": (
                    "Customers lose patience when the page feels slow, especially on mobile.",
                    "Google favours fast pages, so slowness can mean fewer clicks and enquiries.",
                ),
            },
            "thin_content": {
                "title": "Customers miss important content",
                "impacts": (
                    "Lost selling points – your message does not come across clearly.",
                    "Fewer people get in touch than would with clearer, more readable content.",
                ),
            },
            "ai_visibility": {
                "title": "No FAQ or AI-answer optimisation (AEO)",
                "impacts": (
                    "The site rarely shows up in AI-generated answers (ChatGPT, Bing, Google AI).",
                    "Competitors with FAQ and structured data get a head start in new search channels.",
                ),
            },
            "navigation": {
                "title": "Unclear navigation and structure",
                "impacts": (
                    "Visitors cannot quickly find what they are looking for.",
                    "Google gets fewer internal links to follow and understands the structure less well.",
                ),
            },
        },
        "evidence": {
            "no_schema": "Missing structured data (schema.org).",
            "low_text": "Little explanatory text (about {count} characters of visible text).",
            "no_service_headings": "Few clear service headings matching what the audience searches for.",
            "contrast_high": "Weak contrast: many light/pale texts that can be hard to read.",
            "contrast_medium": "Some risk of weak contrast, with several light text styles.",
            "contrast_examples": "Examples of potentially problematic text styles:",
            "contrast_example": "- {example}",
            "heavy_page": "A lot of content loads on one page, which can make it heavy on mobile.",
            "thin_text": (
                "Little overall content explaining who you are, what you do "
                "and why customers should choose you."
            ),
            "no_service_sections": "No clear sections highlighting the most important services.",
            "contrast_readability": "Readability suffers from weak contrast in places.",
            "no_faq": "No FAQ or clear question/answer section that AI answers can draw on.",
            "no_schema_ai": (
                "No structured data making it easy for AI services to understand "
                "who you are and what you offer."
            ),
            "no_nav": "No clear navigation menu found on the page.",
            "few_links": "Few links on to other pages (only {count}).",
        },
        "summary_heading": "What we found",
        "summary_intro": "This site has several weaknesses that affect:",
        "summary_intro_clean": "A closer review can still strengthen:",
        "summary_points": (
            "visibility in Google",
            "user experience",
            "credibility",
            "conversions (how many actually get in touch)",
            "risk of breaching accessibility law",
        ),
        "pitch_heading": "How we can help",
        "pitch_intro": "We deliver:",
        "pitch_points": (
            "Faster pages",
            "Better SEO",
            "Better accessibility",
            "Structured data + AI optimisation",
            "Better conversion and a more professional presentation",
        ),
    },
}


def get_messages(locale: str) -> dict:
    """Return the copy table for a locale.

    Raises:
        ValueError: If the locale is unknown
    """
    if locale not in MESSAGES or locale not in supported_locales():
        raise ValueError(
            f"Unsupported locale: {locale!r} (expected one of {', '.join(supported_locales())})"
        )
    return MESSAGES[locale]
