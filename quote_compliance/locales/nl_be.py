"""Locale pack: België (nl-BE)."""

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

NL_BE = LocalePack(
    code="nl-BE",
    name="Nederlands (België)",
    country="België",
    flag="🇧🇪",
    tax=TaxConfig(
        standard=21,
        reduced=12,
        super_reduced=6,
        zero=0,
        label="BTW",
        rates=(
            TaxRate(0, "0% (Vrijgesteld)", "Medische diensten, opleidingen, enz."),
            TaxRate(6, "6% (Superverlaagd)", "Renovatie woning >10 jaar, basisvoeding"),
            TaxRate(12, "12% (Verlaagd)", "Horeca, sociale huisvesting"),
            TaxRate(21, "21% (Normaal)", "Standaard tarief van toepassing"),
        ),
    ),
    currency=CurrencyConfig(
        code="EUR",
        symbol="€",
        position="after",
        decimal_separator=",",
        thousands_separator=".",
    ),
    date=DateConfig(format="DD/MM/YYYY", locale="nl-BE"),
    legal=LegalTexts(
        quote_validity=(
            "Deze offerte is geldig gedurende 30 dagen vanaf de datum van uitgifte."
        ),
        payment_terms=(
            "Betaling binnen 30 dagen na factuurdatum, tenzij anders overeengekomen."
        ),
        late_payment_penalties=(
            "Bij laattijdige betaling worden verwijlintresten van 10% per jaar "
            "aangerekend, alsook een forfaitaire schadevergoeding van €40 voor "
            "invorderingskosten (Wet van 2 augustus 2002)."
        ),
        withdrawal_right=(
            "Overeenkomstig het Wetboek van economisch recht beschikt de consument over "
            "een termijn van 14 dagen om zijn herroepingsrecht uit te oefenen voor "
            "overeenkomsten op afstand."
        ),
        jurisdiction=(
            "Elk geschil met betrekking tot deze offerte valt onder de bevoegdheid van de "
            "rechtbanken van het gerechtelijk arrondissement van de dienstverlener."
        ),
        data_protection=(
            "Uw persoonsgegevens worden verwerkt in overeenstemming met de AVG. "
            "Raadpleeg ons privacybeleid voor meer informatie."
        ),
        professional_insurance="Onderneming verzekerd voor beroepsaansprakelijkheid.",
    ),
    vocabulary=Vocabulary(
        quote="Offerte",
        invoice="Factuur",
        client="Klant",
        provider="Dienstverlener",
        vat="BTW",
        vat_number="BTW-nummer",
        subtotal="Subtotaal excl. BTW",
        total="Totaal incl. BTW",
        deposit="Voorschot",
        balance="Saldo",
        terms="Algemene voorwaarden",
        conditions="Bijzondere voorwaarden",
        validity="Geldigheid",
        payment_due="Vervaldatum",
        bank_transfer="Overschrijving",
        cash="Contant",
        extra={
            "registration_number": "KBO-nummer",
            "social_security": "RSZ",
            "work_permit": "Arbeidsvergunning",
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
            "BTW-nummer van het bedrijf",
            "KBO-nummer (Kruispuntbank van Ondernemingen)",
            "Betalingsvoorwaarden",
            "Geldigheid van de offerte",
        ),
        rules=(
            ComplianceRule(
                id="vat_format_be",
                description=(
                    "Het Belgische BTW-nummer moet het formaat BE0XXX.XXX.XXX hebben"
                ),
                check=checks.belgian_vat_format,
                severity=ComplianceSeverity.ERROR,
            ),
            ComplianceRule(
                id="renovation_vat_6",
                description=(
                    "Verlaagd tarief van 6% enkel voor renovatie van woningen >10 jaar"
                ),
                check=checks.passes,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="deposit_max_50",
                description=(
                    "Het voorschot mag voor particulieren doorgaans niet meer dan 50% "
                    "bedragen"
                ),
                check=checks.consumer_deposit_within_limit,
                severity=ComplianceSeverity.WARNING,
            ),
            ComplianceRule(
                id="non_standard_vat_be",
                description=(
                    "Het gebruikte BTW-tarief wijkt af van het Belgische standaardtarief "
                    "(21%). Beschikbare tarieven: 0%, 6%, 12%, 21%"
                ),
                check=checks.tax_rate_in(BE_VAT_RATES),
                severity=ComplianceSeverity.INFO,
            ),
        ),
    ),
    number_formats=NumberFormats(quote="OFF-{YYYY}-{NNNN}", invoice="FAC-{YYYY}-{NNNN}"),
    official_contacts=OfficialContacts(
        consumer_protection="FOD Economie - https://economie.fgov.be",
        trade_register="KBO - https://kbopub.economie.fgov.be",
        tax_authority="FOD Financiën - https://financien.belgium.be",
    ),
)
