"""Locale pack: France (fr-FR)."""

from quote_compliance.locales import checks
from quote_compliance.locales.base import (
    ComplianceRequirements,
    ComplianceRule,
    ComplianceSeverity,
    CurrencyConfig,
    DateConfig,
    LegalTexts,
    LocalePack,
    NumberFormats,
    OfficialContacts,
    TaxConfig,
    TaxRate,
    Vocabulary,
)

FR_VAT_RATES = (0, 2.1, 5.5, 10, 20)

FR_FR = LocalePack(
    code="fr-FR",
    name="Français (France)",
    country="France",
    flag="🇫🇷",
    tax=TaxConfig(
        standard=20,
        reduced=10,
        super_reduced=5.5,
        zero=0,
        label="TVA",
        rates=(
            TaxRate(0, "0% (Exonéré)", "Activités exonérées, DOM-TOM"),
            TaxRate(2.1, "2,1% (Super réduit)", "Médicaments remboursés, presse"),
            TaxRate(
                5.5,
                "5,5% (Réduit)",
                "Alimentation, énergie, travaux rénovation énergétique",
            ),
            TaxRate(10, "10% (Intermédiaire)", "Restauration, travaux logement, transport"),
            TaxRate(20, "20% (Normal)", "Taux standard applicable"),
        ),
    ),
    currency=CurrencyConfig(
        code="EUR",
        symbol="€",
        position="after",
        decimal_separator=",",
        thousands_separator=" ",
    ),
    date=DateConfig(format="DD/MM/YYYY", locale="fr-FR"),
    legal=LegalTexts(
        quote_validity=(
            "Ce devis est valable 30 jours à compter de sa date d'émission, "
            "sauf indication contraire."
        ),
        payment_terms=(
            "Paiement à 30 jours date de facture. Pas d'escompte pour paiement anticipé."
        ),
        late_payment_penalties=(
            "En cas de retard de paiement, une pénalité de 3 fois le taux d'intérêt légal "
            "sera appliquée, ainsi qu'une indemnité forfaitaire de 40€ pour frais de "
            "recouvrement (Art. L441-10 Code de commerce)."
        ),
        withdrawal_right=(
            "Conformément au Code de la consommation (Art. L221-18), le consommateur "
            "dispose d'un délai de 14 jours pour exercer son droit de rétractation."
        ),
        jurisdiction=(
            "Tout litige relatif au présent devis sera soumis à la compétence exclusive "
            "des tribunaux français."
        ),
        data_protection=(
            "Conformément à la loi Informatique et Libertés et au RGPD, vous disposez "
            "d'un droit d'accès, de rectification et de suppression de vos données."
        ),
        professional_insurance=(
            "Garantie décennale et assurance responsabilité civile professionnelle "
            "souscrites."
        ),
    ),
    vocabulary=Vocabulary(
        quote="Devis",
        invoice="Facture",
        client="Client",
        provider="Prestataire",
        vat="TVA",
        vat_number="N° TVA intracommunautaire",
        subtotal="Total HT",
        total="Total TTC",
        deposit="Acompte",
        balance="Solde à payer",
        terms="CGV",
        conditions="Conditions particulières",
        validity="Validité du devis",
        payment_due="Date d'échéance",
        bank_transfer="Virement bancaire",
        cash="Espèces",
        extra={
            "siret": "SIRET",
            "siren": "SIREN",
            "rcs": "RCS",
            "ape": "Code APE",
            "decennale": "Garantie décennale",
        },
    ),
    compliance=ComplianceRequirements(
        required_fields=(
            "company_name",
            "siret",
            "address",
            "quote_number",
            "date",
            "client_name",
            "client_address",
            "description",
            "quantity",
            "unit_price",
            "vat_rate",
            "total_ht",
            "total_ttc",
        ),
        mandatory_mentions=(
            "Numéro SIRET",
            "Numéro RCS et ville",
            "Forme juridique et capital social",
            "Adresse du siège social",
            "Numéro de TVA intracommunautaire",
            'Mention "TVA non applicable, art. 293 B du CGI" si auto-entrepreneur',
        ),
        rules=(
            ComplianceRule(
                id="siret_format",
                description="Le SIRET doit contenir 14 chiffres",
                check=checks.siret_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="vat_format_fr",
                description=(
                    "Le numéro de TVA français doit être au format FR XX XXXXXXXXX"
                ),
                check=checks.french_vat_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="renovation_vat_10",
                description=(
                    "Taux réduit de 10% pour travaux dans logements achevés depuis "
                    "plus de 2 ans"
                ),
                check=checks.passes,
                severity=ComplianceSeverity.INFO,
            ),
            ComplianceRule(
                id="auto_entrepreneur_mention",
                description="Mention obligatoire pour auto-entrepreneur exonéré de TVA",
                check=checks.auto_entrepreneur_mention_present,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="decennale_required",
                description="Garantie décennale obligatoire pour travaux du bâtiment",
                check=checks.decennale_declared,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="non_standard_vat_fr",
                description=(
                    "Le taux TVA utilisé diffère du taux standard français (20%). "
                    "Taux disponibles: 0%, 2.1%, 5.5%, 10%, 20%"
                ),
                check=checks.tax_rate_in(FR_VAT_RATES),
                severity=ComplianceSeverity.INFO,
            ),
        ),
    ),
    number_formats=NumberFormats(quote="D{YYYY}{MM}-{NNN}", invoice="F{YYYY}{MM}-{NNN}"),
    official_contacts=OfficialContacts(
        consumer_protection="DGCCRF - https://www.economie.gouv.fr/dgccrf",
        trade_register="Infogreffe - https://www.infogreffe.fr",
        tax_authority="impots.gouv.fr - https://www.impots.gouv.fr",
    ),
)
