"""Locale pack: Belgique (fr-BE)."""

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

BE_VAT_RATES = (0, 6, 12, 21)

FR_BE = LocalePack(
    code="fr-BE",
    name="Français (Belgique)",
    country="Belgique",
    flag="🇧🇪",
    tax=TaxConfig(
        standard=21,
        reduced=12,
        super_reduced=6,
        zero=0,
        label="TVA",
        rates=(
            TaxRate(0, "0% (Exonéré)", "Services médicaux, formations, etc."),
            TaxRate(6, "6% (Super réduit)", "Rénovation logement >10 ans, alimentation de base"),
            TaxRate(12, "12% (Réduit)", "Restauration, logement social"),
            TaxRate(21, "21% (Normal)", "Taux standard applicable"),
        ),
    ),
    currency=CurrencyConfig(
        code="EUR",
        symbol="€",
        position="after",
        decimal_separator=",",
        thousands_separator=".",
    ),
    date=DateConfig(format="DD/MM/YYYY", locale="fr-BE"),
    legal=LegalTexts(
        quote_validity="Ce devis est valable 30 jours à compter de sa date d'émission.",
        payment_terms="Paiement à 30 jours date de facture, sauf accord contraire.",
        late_payment_penalties=(
            "En cas de retard de paiement, des intérêts de retard de 10% par an seront "
            "appliqués, ainsi qu'une indemnité forfaitaire de 40€ pour frais de "
            "recouvrement (Loi du 2 août 2002)."
        ),
        withdrawal_right=(
            "Conformément au Code de droit économique, le consommateur dispose d'un délai "
            "de 14 jours pour exercer son droit de rétractation pour les contrats conclus "
            "à distance."
        ),
        jurisdiction=(
            "Tout litige relatif au présent devis sera soumis aux tribunaux compétents de "
            "l'arrondissement judiciaire du prestataire."
        ),
        data_protection=(
            "Vos données personnelles sont traitées conformément au RGPD. Pour plus "
            "d'informations, consultez notre politique de confidentialité."
        ),
        professional_insurance="Entreprise assurée en responsabilité civile professionnelle.",
    ),
    vocabulary=Vocabulary(
        quote="Devis",
        invoice="Facture",
        client="Client",
        provider="Prestataire",
        vat="TVA",
        vat_number="Numéro de TVA",
        subtotal="Sous-total HTVA",
        total="Total TVAC",
        deposit="Acompte",
        balance="Solde",
        terms="Conditions générales",
        conditions="Conditions particulières",
        validity="Validité",
        payment_due="Échéance",
        bank_transfer="Virement bancaire",
        cash="Espèces",
        extra={
            "registration_number": "Numéro BCE",
            "social_security": "ONSS",
            "work_permit": "Permis de travail",
        },
    ),
    compliance=ComplianceRequirements(
        required_fields=(
            "company_name",
            "vat_number",
            "address",
            "quote_number",
            "date",
            "client_name",
            "description",
            "quantity",
            "unit_price",
            "vat_rate",
            "total",
        ),
        mandatory_mentions=(
            "Numéro de TVA de l'entreprise",
            "Numéro BCE (Banque-Carrefour des Entreprises)",
            "Conditions de paiement",
            "Validité du devis",
        ),
        rules=(
            ComplianceRule(
                id="vat_format_be",
                description="Le numéro de TVA belge doit être au format BE0XXX.XXX.XXX",
                check=checks.belgian_vat_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="renovation_vat_6",
                description="Taux réduit de 6% uniquement pour rénovation de logements >10 ans",
                check=checks.passes,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="deposit_max_50",
                description=(
                    "L'acompte ne peut généralement pas dépasser 50% pour les particuliers"
                ),
                check=checks.consumer_deposit_within_limit,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="non_standard_vat_be",
                description=(
                    "Le taux TVA utilisé diffère du taux standard belge (21%). "
                    "Taux disponibles: 0%, 6%, 12%, 21%"
                ),
                check=checks.tax_rate_in(BE_VAT_RATES),
                severity=ComplianceSeverity.INFO,
            ),
        ),
    ),
    number_formats=NumberFormats(quote="DEV-{YYYY}-{NNNN}", invoice="FAC-{YYYY}-{NNNN}"),
    official_contacts=OfficialContacts(
        consumer_protection="SPF Économie - https://economie.fgov.be",
        trade_register="BCE - https://kbopub.economie.fgov.be",
        tax_authority="SPF Finances - https://finances.belgium.be",
    ),
)
