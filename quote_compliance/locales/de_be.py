"""Locale pack: Ostbelgien (de-BE)."""

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
from quote_compliance.locales.fr_be import BE_VAT_RATES

DE_BE = LocalePack(
    code="de-BE",
    name="Deutsch (Belgien)",
    country="Belgien",
    flag="🇧🇪",
    tax=TaxConfig(
        standard=21,
        reduced=12,
        super_reduced=6,
        zero=0,
        label="MwSt.",
        rates=(
            TaxRate(0, "0% (Befreit)", "Medizinische Leistungen, Ausbildung usw."),
            TaxRate(
                6,
                "6% (Super ermäßigt)",
                "Renovierung Wohnung >10 Jahre, Grundnahrungsmittel",
            ),
            TaxRate(12, "12% (Ermäßigt)", "Gastronomie, Sozialwohnungen"),
            TaxRate(21, "21% (Normal)", "Anwendbarer Standardsatz"),
        ),
    ),
    currency=CurrencyConfig(
        code="EUR",
        symbol="€",
        position="after",
        decimal_separator=",",
        thousands_separator=".",
    ),
    date=DateConfig(format="DD.MM.YYYY", locale="de-BE"),
    legal=LegalTexts(
        quote_validity="Dieses Angebot ist 30 Tage ab Ausstellungsdatum gültig.",
        payment_terms=(
            "Zahlung innerhalb von 30 Tagen nach Rechnungsdatum, sofern nicht anders "
            "vereinbart."
        ),
        late_payment_penalties=(
            "Bei verspäteter Zahlung werden Verzugszinsen von 10% pro Jahr berechnet "
            "sowie eine pauschale Entschädigung von 40€ für Inkassokosten (Gesetz vom "
            "2. August 2002)."
        ),
        withdrawal_right=(
            "Gemäß dem Wirtschaftsgesetzbuch hat der Verbraucher eine Frist von 14 Tagen, "
            "um sein Widerrufsrecht bei Fernabsatzverträgen auszuüben."
        ),
        jurisdiction=(
            "Jeder Streit bezüglich dieses Angebots unterliegt der Zuständigkeit der "
            "Gerichte des Gerichtsbezirks des Dienstleisters."
        ),
        data_protection=(
            "Ihre personenbezogenen Daten werden gemäß der DSGVO verarbeitet. Weitere "
            "Informationen finden Sie in unserer Datenschutzerklärung."
        ),
        professional_insurance="Unternehmen mit Berufshaftpflichtversicherung.",
    ),
    vocabulary=Vocabulary(
        quote="Angebot",
        invoice="Rechnung",
        client="Kunde",
        provider="Dienstleister",
        vat="MwSt.",
        vat_number="MwSt.-Nummer",
        subtotal="Zwischensumme ohne MwSt.",
        total="Gesamtbetrag inkl. MwSt.",
        deposit="Anzahlung",
        balance="Restbetrag",
        terms="Allgemeine Geschäftsbedingungen",
        conditions="Besondere Bedingungen",
        validity="Gültigkeit",
        payment_due="Fälligkeitsdatum",
        bank_transfer="Überweisung",
        cash="Bargeld",
        extra={
            "registration_number": "ZDU-Nummer",
            "social_security": "LSS",
            "work_permit": "Arbeitserlaubnis",
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
            "MwSt.-Nummer des Unternehmens",
            "ZDU-Nummer (Zentrale Datenbank der Unternehmen)",
            "Zahlungsbedingungen",
            "Gültigkeit des Angebots",
        ),
        rules=(
            ComplianceRule(
                id="vat_format_be",
                description=(
                    "Die belgische MwSt.-Nummer muss das Format BE0XXX.XXX.XXX haben"
                ),
                check=checks.belgian_vat_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="renovation_vat_6",
                description=(
                    "Ermäßigter Satz von 6% nur für Renovierung von Wohnungen >10 Jahre"
                ),
                check=checks.passes,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="deposit_max_50",
                description=(
                    "Die Anzahlung darf für Privatpersonen in der Regel 50% nicht "
                    "überschreiten"
                ),
                check=checks.consumer_deposit_within_limit,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="non_standard_vat_be",
                description=(
                    "Der verwendete MwSt.-Satz weicht vom belgischen Standardsatz (21%) "
                    "ab. Verfügbare Sätze: 0%, 6%, 12%, 21%"
                ),
                check=checks.tax_rate_in(BE_VAT_RATES),
                severity=ComplianceSeverity.INFO,
            ),
        ),
    ),
    number_formats=NumberFormats(quote="ANG-{YYYY}-{NNNN}", invoice="REC-{YYYY}-{NNNN}"),
    official_contacts=OfficialContacts(
        consumer_protection="FÖD Wirtschaft - https://economie.fgov.be",
        trade_register="ZDU - https://kbopub.economie.fgov.be",
        tax_authority="FÖD Finanzen - https://finanzen.belgium.be",
    ),
)
