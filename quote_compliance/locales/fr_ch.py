"""Locale pack: Suisse romande (fr-CH).

Switzerland has no statutory withdrawal right for distance contracts, so
``legal.withdrawal_right`` stays unset and the pack has no super-reduced rate.
"""

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

CH_VAT_RATES = (0, 2.6, 3.8, 8.1)

FR_CH = LocalePack(
    code="fr-CH",
    name="Français (Suisse)",
    country="Suisse",
    flag="🇨🇭",
    tax=TaxConfig(
        standard=8.1,
        reduced=2.6,
        zero=0,
        label="TVA",
        rates=(
            TaxRate(0, "0% (Exonéré)", "Exportations, services médicaux, formations"),
            TaxRate(2.6, "2,6% (Réduit)", "Alimentation, médicaments, livres, journaux"),
            TaxRate(3.8, "3,8% (Hébergement)", "Services d'hébergement"),
            TaxRate(8.1, "8,1% (Normal)", "Taux standard applicable"),
        ),
    ),
    currency=CurrencyConfig(
        code="CHF",
        symbol="CHF",
        position="before",
        decimal_separator=".",
        thousands_separator="'",
    ),
    date=DateConfig(format="DD.MM.YYYY", locale="fr-CH"),
    legal=LegalTexts(
        quote_validity=(
            "Ce devis est valable 30 jours à compter de sa date d'établissement."
        ),
        payment_terms=(
            "Paiement net à 30 jours. Un escompte de 2% est accordé pour paiement "
            "comptant."
        ),
        late_payment_penalties=(
            "En cas de retard de paiement, des intérêts moratoires de 5% l'an seront "
            "appliqués (Art. 104 CO)."
        ),
        jurisdiction=(
            "Le for juridique est au siège de l'entreprise. Le droit suisse est applicable."
        ),
        data_protection=(
            "Vos données sont traitées conformément à la Loi fédérale sur la protection "
            "des données (LPD)."
        ),
        professional_insurance=(
            "Entreprise au bénéfice d'une assurance responsabilité civile professionnelle."
        ),
    ),
    vocabulary=Vocabulary(
        quote="Devis",
        invoice="Facture",
        client="Client",
        provider="Prestataire",
        vat="TVA",
        vat_number="N° IDE-TVA",
        subtotal="Total hors TVA",
        total="Total TTC",
        deposit="Acompte",
        balance="Solde",
        terms="CG",
        conditions="Conditions particulières",
        validity="Validité",
        payment_due="Échéance",
        bank_transfer="Virement bancaire",
        cash="Comptant",
        extra={
            "ide": "Numéro IDE",
            "rc": "Registre du Commerce",
            "canton": "Canton",
            "qr_bill": "QR-facture",
        },
    ),
    compliance=ComplianceRequirements(
        required_fields=(
            "company_name",
            "ide_number",
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
            "Numéro IDE (Identification des entreprises)",
            "Raison sociale complète",
            "Siège de l'entreprise",
            "Numéro de TVA si assujetti",
        ),
        rules=(
            ComplianceRule(
                id="ide_format",
                description="Le numéro IDE doit être au format CHE-XXX.XXX.XXX",
                check=checks.swiss_ide_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="vat_format_ch",
                description=(
                    "Le numéro de TVA suisse doit être au format CHE-XXX.XXX.XXX TVA"
                ),
                check=checks.swiss_vat_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="vat_threshold",
                description=(
                    "L'assujettissement à la TVA est obligatoire au-delà de "
                    "CHF 100'000 de CA"
                ),
                check=checks.swiss_vat_registration,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="qr_bill_iban",
                description=(
                    "Pour la QR-facture, un IBAN suisse (QR-IBAN) est recommandé"
                ),
                check=checks.swiss_qr_iban,
                severity=ComplianceSeverity.INFO,
            ),
            ComplianceRule(
                id="currency_mismatch_ch",
                description=(
                    "En Suisse, les devis doivent être en CHF (franc suisse), pas en EUR"
                ),
                check=checks.swiss_franc_currency,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="non_standard_vat_ch",
                description=(
                    "Le taux TVA utilisé diffère du taux standard suisse (8.1%). "
                    "Taux disponibles: 0%, 2.6%, 3.8%, 8.1%"
                ),
                check=checks.tax_rate_in(CH_VAT_RATES),
                severity=ComplianceSeverity.INFO,
            ),
        ),
    ),
    number_formats=NumberFormats(quote="OFF-{YYYY}-{NNNN}", invoice="FACT-{YYYY}-{NNNN}"),
    official_contacts=OfficialContacts(
        consumer_protection="SECO - https://www.seco.admin.ch",
        trade_register="Zefix - https://www.zefix.ch",
        tax_authority="AFC - https://www.estv.admin.ch",
    ),
)
