"""Risk pattern and legal mention catalog.

``RISK_PATTERNS`` lists risky phrasings in declaration order; entries without
``locales`` apply everywhere, the others only to the listed locale codes.
``LEGAL_MENTIONS`` lists the sentences a quote must carry in a given locale
when the mention's condition holds.

The catalog is validated once at import time: a malformed regular expression
or an inconsistent entry is a broken release and raises immediately.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from quote_compliance.core.config import SUPPORTED_LOCALES
from quote_compliance.core.exceptions import CatalogIntegrityError, PatternCompileError
from quote_compliance.core.logging import get_logger
from quote_compliance.services.risk import conditions
from quote_compliance.services.risk.autofix import AUTO_FIX_PATTERN_IDS
from quote_compliance.services.risk.base import (
    REGEX_FLAGS,
    LegalMention,
    RiskCategory,
    RiskPattern,
    RiskSeverity,
)

logger = get_logger(__name__)


RISK_PATTERNS: tuple[RiskPattern, ...] = (
    # =========================================================
    # Engagements fermes
    # =========================================================
    RiskPattern(
        id="binding_guarantee",
        category=RiskCategory.BINDING_COMMITMENT,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\bgaranti[es]?\s+(à\s+100%|totale?ment|absolument|sans\s+réserve)",
            r"\bje\s+m'engage\s+(fermement|définitivement|irrévocablement)",
            r"\bengagement\s+(ferme|définitif|irrévocable)",
        ),
        description="Engagement ferme détecté",
        explanation=(
            "Cette formulation constitue un engagement contractuel fort qui peut être "
            "difficile à honorer dans tous les cas."
        ),
        suggestion=(
            'Préférez "sous réserve des conditions habituelles" ou '
            '"dans la mesure du possible".'
        ),
    ),
    RiskPattern(
        id="absolute_promise",
        category=RiskCategory.BINDING_COMMITMENT,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bje\s+vous\s+promets",
            r"\bpromesse\s+de\s+résultat",
            r"\brésultat\s+garanti",
            r"\bsatisfaction\s+garantie\s+ou\s+remboursé",
        ),
        description="Promesse absolue détectée",
        explanation=(
            "Les promesses de résultat engagent votre responsabilité de manière importante."
        ),
        suggestion='Reformulez en "nous nous efforcerons de" ou "notre objectif est de".',
    ),
    # =========================================================
    # Garanties de prix
    # =========================================================
    RiskPattern(
        id="fixed_price_guarantee",
        category=RiskCategory.PRICE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bprix\s+(fixe|ferme|définitif|garanti|bloqué)",
            r"\baucune\s+modification\s+de\s+prix",
            r"\bprix\s+non\s+(révisable|modifiable)",
        ),
        description="Garantie de prix fixe",
        explanation=(
            "Un prix fixe garanti vous empêche de répercuter les hausses de coûts "
            "imprévues."
        ),
        suggestion=(
            'Ajoutez "hors variations exceptionnelles des matières premières" ou '
            "prévoyez une clause de révision."
        ),
    ),
    RiskPattern(
        id="best_price_guarantee",
        category=RiskCategory.PRICE_GUARANTEE,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\bmeilleur\s+prix(\s+garanti)?",
            r"\bprix\s+(imbattable|le\s+plus\s+bas)",
            r"\bon\s+s'aligne\s+sur\s+la\s+concurrence",
        ),
        description="Garantie de meilleur prix",
        explanation=(
            "Cette mention peut être considérée comme une pratique commerciale engageante."
        ),
    ),
    # =========================================================
    # Garanties de délais
    # =========================================================
    RiskPattern(
        id="deadline_guarantee",
        category=RiskCategory.TIMELINE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bdélai\s+(garanti|ferme|impératif)",
            r"\blivraison\s+garantie\s+(le|avant)",
            r"\bterminé\s+(au\s+plus\s+tard|obligatoirement)\s+le",
            r"\brespect\s+absolu\s+des\s+délais",
        ),
        description="Garantie de délai ferme",
        explanation="Les délais garantis peuvent entraîner des pénalités si non respectés.",
        suggestion=(
            'Utilisez "délai indicatif" ou "sous réserve de conditions '
            'météo/approvisionnement".'
        ),
    ),
    RiskPattern(
        id="express_delivery",
        category=RiskCategory.TIMELINE_GUARANTEE,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\blivrais?on\s+express",
            r"\b(24|48|72)\s*h(eures)?\s+chrono",
            r"\bintervention\s+immédiate",
        ),
        description="Engagement de rapidité",
        explanation="Les engagements de délais courts peuvent être difficiles à tenir.",
        suggestion="Précisez les conditions (jours ouvrés, disponibilité, etc.).",
    ),
    # =========================================================
    # Clauses pénales
    # =========================================================
    RiskPattern(
        id="penalty_clause",
        category=RiskCategory.PENALTY_CLAUSE,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\bpénalité\s+de\s+\d+",
            r"\bpénalités?\s+de\s+retard",
            r"\bastreinte\s+de\s+\d+",
            r"\b\d+\s*[€%]\s*(par\s+jour|/jour)\s+de\s+retard",
        ),
        description="Clause pénale détectée",
        explanation=(
            "Les clauses pénales créent des engagements financiers en cas de non-respect."
        ),
        suggestion="Assurez-vous que ces pénalités sont réciproques ou négociez-les.",
    ),
    # =========================================================
    # Responsabilité
    # =========================================================
    RiskPattern(
        id="unlimited_liability",
        category=RiskCategory.LIABILITY,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\bresponsabilité\s+(totale|illimitée|entière)",
            r"\bje\s+(prends|assume)\s+toute\s+(la\s+)?responsabilité",
            r"\baucune\s+limite\s+de\s+responsabilité",
        ),
        description="Responsabilité non plafonnée",
        explanation="Engager une responsabilité illimitée est très risqué juridiquement.",
        suggestion=(
            "Limitez votre responsabilité au montant du devis ou à vos garanties "
            "d'assurance."
        ),
    ),
    RiskPattern(
        id="result_obligation",
        category=RiskCategory.LIABILITY,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bobligation\s+de\s+résultat",
            r"\bnous\s+garantissons\s+le\s+résultat",
        ),
        description="Obligation de résultat",
        explanation=(
            "L'obligation de résultat est plus contraignante que l'obligation de moyens."
        ),
        suggestion=(
            'Préférez "obligation de moyens" avec une description claire des efforts '
            "fournis."
        ),
    ),
    # =========================================================
    # Annulation
    # =========================================================
    RiskPattern(
        id="no_cancellation",
        category=RiskCategory.CANCELLATION,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\baucune\s+annulation\s+possible",
            r"\bcommande\s+(ferme|non\s+annulable)",
            r"\bsans\s+possibilité\s+d'annulation",
        ),
        description="Clause d'annulation restrictive",
        explanation=(
            "L'impossibilité d'annuler peut poser problème avec les droits des "
            "consommateurs."
        ),
        suggestion="Prévoyez des conditions d'annulation avec préavis raisonnable.",
    ),
    # =========================================================
    # Périmètre
    # =========================================================
    RiskPattern(
        id="vague_scope",
        category=RiskCategory.SCOPE_CREEP,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\bet\s+autres\s+travaux",
            r"\btous\s+travaux\s+nécessaires",
            r"\by\s+compris\s+ce\s+qui\s+sera\s+nécessaire",
            r"\bainsi\s+que\s+tout\s+ce\s+qui",
        ),
        description="Périmètre flou détecté",
        explanation=(
            "Les formulations vagues peuvent mener à des demandes additionnelles non "
            "chiffrées."
        ),
        suggestion="Soyez précis dans la description des prestations incluses.",
    ),
    RiskPattern(
        id="all_inclusive",
        category=RiskCategory.SCOPE_CREEP,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\btout\s+compris",
            r"\bclé\s+en\s+main\s+complet",
            r"\baucun\s+supplément",
            r"\bsans\s+frais\s+supplémentaires",
        ),
        description='Engagement "tout compris"',
        explanation='Le "tout compris" peut inclure des imprévus coûteux.',
        suggestion="Listez explicitement ce qui est inclus et ce qui ne l'est pas.",
    ),
    # =========================================================
    # Ambiguïtés
    # =========================================================
    RiskPattern(
        id="ambiguous_quantity",
        category=RiskCategory.AMBIGUITY,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\benviron\s+\d+",
            r"\bà\s+peu\s+près\s+\d+",
            r"\bplus\s+ou\s+moins\s+\d+",
            r"\bquelques",
            r"\bcertains",
        ),
        description="Quantité imprécise",
        explanation="Les quantités approximatives peuvent créer des litiges.",
        suggestion="Indiquez des quantités précises ou une fourchette claire.",
    ),
    RiskPattern(
        id="ambiguous_timeline",
        category=RiskCategory.AMBIGUITY,
        severity=RiskSeverity.LOW,
        patterns=(
            r"\bdans\s+les\s+meilleurs\s+délais",
            r"\brapidement",
            r"\bdès\s+que\s+possible",
            r"\bprochainement",
        ),
        description="Délai imprécis",
        explanation="Les délais vagues peuvent créer des attentes irréalistes.",
        suggestion="Indiquez une date ou une fourchette de dates précise.",
    ),
    # =========================================================
    # Conditions de paiement
    # =========================================================
    RiskPattern(
        id="payment_on_completion",
        category=RiskCategory.PAYMENT_TERMS,
        severity=RiskSeverity.INFO,
        patterns=(
            r"\bpaiement\s+à\s+la\s+livraison",
            r"\bsolde\s+à\s+réception",
        ),
        description="Paiement à la livraison",
        explanation="Information sur les conditions de paiement détectée.",
    ),
    RiskPattern(
        id="full_prepayment",
        category=RiskCategory.PAYMENT_TERMS,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\bpaiement\s+(intégral\s+)?à\s+la\s+commande",
            r"\b100\s*%\s*(d')?acompte",
            r"\bpaiement\s+total\s+avant",
        ),
        description="Paiement intégral anticipé",
        explanation=(
            "Demander 100% à la commande peut être perçu négativement par les clients."
        ),
        suggestion=(
            "Proposez un échéancier (ex: 30% à la commande, solde à la livraison)."
        ),
    ),
    # =========================================================
    # Suisse (fr-CH)
    # =========================================================
    RiskPattern(
        id="ch_currency_eur",
        category=RiskCategory.PAYMENT_TERMS,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\d+(?:['.,]\d+)*\s*(?:€|\beur(?:os?)?\b)",
            r"€\s*\d+",
        ),
        description="Montant en euros dans un devis suisse",
        explanation=(
            "En Suisse, les devis sont établis en francs suisses ; un montant en euros "
            "expose au risque de change et peut prêter à confusion."
        ),
        suggestion="Exprimez les montants en CHF ou précisez le taux de conversion appliqué.",
        locales=("fr-CH",),
    ),
    # =========================================================
    # France (fr-FR)
    # =========================================================
    RiskPattern(
        id="fr_decennale_missing",
        category=RiskCategory.WARRANTY,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\b(garantie|assurance)\s+décennale\s+non\s+souscrite",
            r"\bsans\s+(garantie\s+|assurance\s+)?décennale",
            r"\bpas\s+de\s+(garantie\s+|assurance\s+)?décennale",
        ),
        description="Absence de garantie décennale",
        explanation=(
            "La garantie décennale est obligatoire pour les travaux du bâtiment en "
            "France ; son absence expose à des sanctions pénales."
        ),
        suggestion=(
            "Souscrivez une assurance décennale et mentionnez l'assureur et la "
            "couverture géographique."
        ),
        locales=("fr-FR",),
    ),
    RiskPattern(
        id="fr_cgv_absent",
        category=RiskCategory.MISSING_INFO,
        severity=RiskSeverity.LOW,
        patterns=(
            r"\bsans\s+(CGV|conditions\s+générales(\s+de\s+vente)?)\b",
        ),
        description="Conditions générales de vente absentes",
        explanation=(
            "En France, les CGV doivent être communiquées à tout client professionnel "
            "qui en fait la demande."
        ),
        suggestion="Joignez vos conditions générales de vente au devis.",
        locales=("fr-FR",),
    ),
    # =========================================================
    # Belgique néerlandophone (nl-BE)
    # =========================================================
    RiskPattern(
        id="nl_binding_guarantee",
        category=RiskCategory.BINDING_COMMITMENT,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\b100\s*%\s+gegarandeerd",
            r"\b(volledig|absoluut|onvoorwaardelijk)\s+gegarandeerd",
            r"\bwij\s+garanderen\s+(volledig|absoluut)",
        ),
        description="Vaste verbintenis gedetecteerd",
        explanation=(
            "Deze formulering vormt een sterke contractuele verbintenis die moeilijk in "
            "alle gevallen na te komen is."
        ),
        suggestion='Verkies "onder voorbehoud van de gebruikelijke voorwaarden".',
        locales=("nl-BE",),
    ),
    RiskPattern(
        id="nl_fixed_price",
        category=RiskCategory.PRICE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bvaste\s+prijs",
            r"\bprijs\s+(gegarandeerd|definitief|onherroepelijk)",
            r"\bgeen\s+prijswijziging(en)?",
        ),
        description="Gegarandeerde vaste prijs",
        explanation=(
            "Een gegarandeerde vaste prijs belet u onvoorziene kostenstijgingen door te "
            "rekenen."
        ),
        suggestion="Voeg een prijsherzieningsclausule toe.",
        locales=("nl-BE",),
    ),
    RiskPattern(
        id="nl_deadline_guarantee",
        category=RiskCategory.TIMELINE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bgegarandeerde\s+(levertermijn|levering|termijn)",
            r"\btermijn\s+(gegarandeerd|bindend)",
            r"\buiterlijk\s+opgeleverd\s+op",
        ),
        description="Gegarandeerde termijn",
        explanation=(
            "Gegarandeerde termijnen kunnen tot boetes leiden wanneer ze niet worden "
            "gehaald."
        ),
        suggestion='Gebruik "indicatieve termijn".',
        locales=("nl-BE",),
    ),
    RiskPattern(
        id="nl_unlimited_liability",
        category=RiskCategory.LIABILITY,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\b(volledige|onbeperkte)\s+aansprakelijkheid",
            r"\bgeen\s+beperking\s+van\s+(de\s+)?aansprakelijkheid",
        ),
        description="Onbeperkte aansprakelijkheid",
        explanation="Een onbeperkte aansprakelijkheid is juridisch zeer riskant.",
        suggestion=(
            "Beperk uw aansprakelijkheid tot het bedrag van de offerte of uw "
            "verzekeringsdekking."
        ),
        locales=("nl-BE",),
    ),
    RiskPattern(
        id="nl_vague_scope",
        category=RiskCategory.SCOPE_CREEP,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\ben\s+andere\s+werken",
            r"\balle\s+nodige\s+werken",
            r"\balsook\s+alles\s+wat",
        ),
        description="Vage omschrijving van de werken",
        explanation=(
            "Vage formuleringen kunnen leiden tot bijkomende, niet begrote vragen."
        ),
        suggestion="Omschrijf nauwkeurig welke prestaties inbegrepen zijn.",
        locales=("nl-BE",),
    ),
    # =========================================================
    # Ostbelgien (de-BE)
    # =========================================================
    RiskPattern(
        id="de_binding_guarantee",
        category=RiskCategory.BINDING_COMMITMENT,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\b100\s*%\s+garantiert",
            r"\b(voll|absolut|uneingeschränkt)\s+garantiert",
            r"\bverbindliche\s+zusage",
        ),
        description="Feste Verpflichtung erkannt",
        explanation=(
            "Diese Formulierung stellt eine starke vertragliche Verpflichtung dar, die "
            "nicht in allen Fällen einzuhalten ist."
        ),
        suggestion='Bevorzugen Sie "vorbehaltlich der üblichen Bedingungen".',
        locales=("de-BE",),
    ),
    RiskPattern(
        id="de_fixed_price",
        category=RiskCategory.PRICE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bfestpreis",
            r"\bpreis\s+(garantiert|verbindlich|endgültig)",
            r"\bkeine\s+preisänderung(en)?",
        ),
        description="Garantierter Festpreis",
        explanation=(
            "Ein garantierter Festpreis verhindert die Weitergabe unvorhergesehener "
            "Kostensteigerungen."
        ),
        suggestion="Fügen Sie eine Preisanpassungsklausel hinzu.",
        locales=("de-BE",),
    ),
    RiskPattern(
        id="de_deadline_guarantee",
        category=RiskCategory.TIMELINE_GUARANTEE,
        severity=RiskSeverity.HIGH,
        patterns=(
            r"\bgarantierte[rn]?\s+(liefertermin|lieferung|frist)",
            r"\b(verbindlicher|fester)\s+liefertermin",
            r"\bspätestens\s+fertiggestellt\s+am",
        ),
        description="Garantierte Frist",
        explanation=(
            "Garantierte Fristen können bei Nichteinhaltung zu Vertragsstrafen führen."
        ),
        suggestion='Verwenden Sie "voraussichtlicher Termin".',
        locales=("de-BE",),
    ),
    RiskPattern(
        id="de_unlimited_liability",
        category=RiskCategory.LIABILITY,
        severity=RiskSeverity.CRITICAL,
        patterns=(
            r"\b(volle|unbeschränkte|unbegrenzte)\s+haftung",
            r"\bkeine\s+haftungsbeschränkung",
        ),
        description="Unbegrenzte Haftung",
        explanation="Eine unbegrenzte Haftung ist rechtlich sehr riskant.",
        suggestion=(
            "Begrenzen Sie Ihre Haftung auf den Angebotsbetrag oder Ihre "
            "Versicherungsdeckung."
        ),
        locales=("de-BE",),
    ),
    RiskPattern(
        id="de_vague_scope",
        category=RiskCategory.SCOPE_CREEP,
        severity=RiskSeverity.MEDIUM,
        patterns=(
            r"\bund\s+sonstige\s+arbeiten",
            r"\balle\s+notwendigen\s+arbeiten",
            r"\bsowie\s+alles\s+weitere",
        ),
        description="Unklarer Leistungsumfang",
        explanation=(
            "Vage Formulierungen können zu zusätzlichen, nicht kalkulierten Forderungen "
            "führen."
        ),
        suggestion="Beschreiben Sie die enthaltenen Leistungen genau.",
        locales=("de-BE",),
    ),
)


LEGAL_MENTIONS: tuple[LegalMention, ...] = (
    # Belgique
    LegalMention(
        id="be_vat_renovation",
        category=RiskCategory.BINDING_COMMITMENT,
        locale="fr-BE",
        text=(
            "Taux de TVA de 6% applicable sous réserve que le logement ait plus de 10 ans "
            "et soit utilisé principalement comme habitation privée. Une attestation sera "
            "à signer par le client."
        ),
        condition=conditions.renovation_reduced_vat,
    ),
    LegalMention(
        id="be_consumer_withdrawal",
        category=RiskCategory.CANCELLATION,
        locale="fr-BE",
        text=(
            "Conformément au Code de droit économique, le consommateur dispose d'un délai "
            "de 14 jours pour exercer son droit de rétractation pour tout contrat conclu à "
            "distance ou hors établissement."
        ),
        condition=conditions.consumer_remote_contract,
    ),
    # België
    LegalMention(
        id="nl_vat_renovation",
        category=RiskCategory.BINDING_COMMITMENT,
        locale="nl-BE",
        text=(
            "BTW-tarief van 6% van toepassing op voorwaarde dat de woning ouder is dan "
            "10 jaar en hoofdzakelijk als privéwoning wordt gebruikt. De klant dient een "
            "attest te ondertekenen."
        ),
        condition=conditions.renovation_reduced_vat,
    ),
    LegalMention(
        id="nl_consumer_withdrawal",
        category=RiskCategory.CANCELLATION,
        locale="nl-BE",
        text=(
            "Overeenkomstig het Wetboek van economisch recht beschikt de consument over "
            "een termijn van 14 dagen om zijn herroepingsrecht uit te oefenen voor elke "
            "overeenkomst op afstand of buiten de verkoopruimten."
        ),
        condition=conditions.consumer_remote_contract,
    ),
    # Belgien
    LegalMention(
        id="de_vat_renovation",
        category=RiskCategory.BINDING_COMMITMENT,
        locale="de-BE",
        text=(
            "MwSt.-Satz von 6% anwendbar, sofern die Wohnung älter als 10 Jahre ist und "
            "hauptsächlich als Privatwohnung genutzt wird. Der Kunde muss eine "
            "Bescheinigung unterzeichnen."
        ),
        condition=conditions.renovation_reduced_vat,
    ),
    LegalMention(
        id="de_consumer_withdrawal",
        category=RiskCategory.CANCELLATION,
        locale="de-BE",
        text=(
            "Gemäß dem Wirtschaftsgesetzbuch verfügt der Verbraucher über eine Frist von "
            "14 Tagen, um sein Widerrufsrecht bei Fernabsatzverträgen oder außerhalb von "
            "Geschäftsräumen geschlossenen Verträgen auszuüben."
        ),
        condition=conditions.consumer_remote_contract,
    ),
    # France
    LegalMention(
        id="fr_decennale",
        category=RiskCategory.WARRANTY,
        locale="fr-FR",
        text=(
            "Entreprise titulaire d'une garantie décennale souscrite auprès de "
            "{insurance_company}."
        ),
        condition=conditions.decennale_sector,
    ),
    LegalMention(
        id="fr_auto_entrepreneur",
        category=RiskCategory.BINDING_COMMITMENT,
        locale="fr-FR",
        text="TVA non applicable, art. 293 B du Code général des impôts.",
        condition=conditions.auto_entrepreneur_vat_exempt,
    ),
    # Suisse
    LegalMention(
        id="ch_vat_small_business",
        category=RiskCategory.BINDING_COMMITMENT,
        locale="fr-CH",
        text=(
            "Entreprise non assujettie à la TVA (chiffre d'affaires inférieur à "
            "CHF 100'000)."
        ),
        condition=conditions.swiss_small_business,
    ),
)


# =========================================================
# Validation
# =========================================================


def _check_locales(entry_id: str, locales: Iterable[str]) -> None:
    unknown = [code for code in locales if code not in SUPPORTED_LOCALES]
    if unknown:
        raise CatalogIntegrityError(
            "Catalog entry references an unknown locale",
            entry_id=entry_id,
            reason=f"unknown locale(s): {', '.join(unknown)}",
        )


def validate_catalog(
    patterns: Iterable[RiskPattern] = RISK_PATTERNS,
    mentions: Iterable[LegalMention] = LEGAL_MENTIONS,
    auto_fix_ids: Iterable[str] = AUTO_FIX_PATTERN_IDS,
) -> dict[str, tuple[re.Pattern[str], ...]]:
    """Compile and cross-check the catalog.

    Args:
        patterns: Risk patterns to validate.
        mentions: Legal mentions to validate.
        auto_fix_ids: Pattern ids that carry an automatic correction.

    Returns:
        Compiled matchers keyed by pattern id.

    Raises:
        PatternCompileError: A matcher is not a valid regular expression.
        CatalogIntegrityError: Duplicate id, empty matcher list, unknown
            locale, or auto-fix entry without a matching pattern.
    """
    compiled: dict[str, tuple[re.Pattern[str], ...]] = {}

    for pattern in patterns:
        if pattern.id in compiled:
            raise CatalogIntegrityError(
                "Duplicate risk pattern id", entry_id=pattern.id, reason="duplicate id"
            )
        if not pattern.patterns:
            raise CatalogIntegrityError(
                "Risk pattern has no matcher", entry_id=pattern.id, reason="empty patterns"
            )
        _check_locales(pattern.id, pattern.locales)

        matchers = []
        for source in pattern.patterns:
            try:
                matchers.append(re.compile(source, REGEX_FLAGS))
            except re.error as e:
                raise PatternCompileError(
                    "Invalid regular expression in risk pattern",
                    pattern_id=pattern.id,
                    source=source,
                    original_error=e,
                ) from e
        compiled[pattern.id] = tuple(matchers)

    mention_ids: set[str] = set()
    for mention in mentions:
        if mention.id in mention_ids:
            raise CatalogIntegrityError(
                "Duplicate legal mention id", entry_id=mention.id, reason="duplicate id"
            )
        mention_ids.add(mention.id)
        _check_locales(mention.id, (mention.locale,))

    for fix_id in auto_fix_ids:
        if fix_id not in compiled:
            raise CatalogIntegrityError(
                "Auto-fix entry refers to an unknown pattern",
                entry_id=fix_id,
                reason="no such pattern",
            )

    return compiled


COMPILED_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = validate_catalog()
RISK_PATTERNS_BY_ID: dict[str, RiskPattern] = {p.id: p for p in RISK_PATTERNS}

logger.debug(
    f"Risk catalog loaded: {len(RISK_PATTERNS)} patterns, {len(LEGAL_MENTIONS)} mentions"
)


# =========================================================
# Lookup
# =========================================================


def patterns_for(locale: str) -> list[RiskPattern]:
    """Patterns applicable to ``locale``, in declaration order."""
    return [p for p in RISK_PATTERNS if p.applies_to(locale)]


def matchers_for(pattern: RiskPattern) -> tuple[re.Pattern[str], ...]:
    """Compiled matchers of a catalog pattern (compiled on demand for others)."""
    matchers = COMPILED_PATTERNS.get(pattern.id)
    if matchers is None or RISK_PATTERNS_BY_ID.get(pattern.id) is not pattern:
        return pattern.compile()
    return matchers


def mandatory_mentions_for(locale: str, quote: Mapping[str, Any]) -> list[LegalMention]:
    """Mentions of ``locale`` whose condition holds for ``quote``."""
    return [m for m in LEGAL_MENTIONS if m.locale == locale and m.is_required(quote)]


