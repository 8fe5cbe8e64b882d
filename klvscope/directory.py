"""Static field directory and currency reference data for KLV payment metadata."""
from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from .entries import CurrencyDetail
from .mcc_codes import MCC_TABLE

UNKNOWN_FIELD: Final = "Unknown"

CURRENCY_FIELD_KEY: Final = "049"
MCC_FIELD_KEY: Final = "026"

FIELD_DIRECTORY: Final[Mapping[str, str]] = MappingProxyType(
    {
        "002": "Tracking Number",
        "004": "Original Transaction Amount",
        "010": "Conversion Rate",
        "026": "Merchant Category Code",
        "032": "Acquiring Institution Code",
        "037": "Retrieval Reference Number",
        "041": "Terminal ID",
        "042": "Merchant Identifier",
        "043": "Merchant Description",
        "044": "Merchant Name",
        "045": "Transaction Type Identifier",
        "048": "Fraud Scoring Data",
        "049": "Original Currency Code",
        "050": "From Account",
        "052": "Pin Block",
        "061": "POS Data",
        "063": "TraceID",
        "067": "Extended Payment Code",
        "068": "Is Recurring",
        "069": "Message Reason Code",
        "085": "Markup Amount",
        "108": "Recipient Name",
        "109": "Recipient Address",
        "110": "Recipient Account Number",
        "111": "Recipient Account Number Type",
        "250": "Capture Mode",
        "251": "Network",
        "252": "Fee Type",
        "253": "Last Four Digits PAN",
        "254": "MDES Digitized PAN",
        "255": "MDES Digitized Wallet ID",
        "256": "Adjustment Reason",
        "257": "Reference ID",
        "258": "Markup Type",
        "259": "Acquirer Country",
        "260": "Mobile Number",
        "261": "Transaction Fee Amount",
        "262": "Transaction Subtype",
        "263": "Card Issuer Data",
        "264": "Tax",
        "265": "Tax Amount Base",
        "266": "Retailer Data",
        "267": "IAC Tax Amount",
        "268": "Number of Installments",
        "269": "Customer ID",
        "270": "Security Services Data",
        "271": "On Behalf of Services",
        "272": "Original Merchant Description",
        "273": "Installments Financing Type",
        "274": "Status",
        "275": "Installments Grace Period",
        "276": "Installments Type of Credit",
        "277": "Payments Initiator",
        "278": "Payment Initiator Subtype",
        "300": "Additional Amount",
        "301": "Second Additional Amount",
        "302": "Cashback POS Currency Code",
        "303": "Cashback POS Amount",
        "400": "Sender Name",
        "401": "Sender Address",
        "402": "Sender City",
        "403": "Sender State",
        "404": "Sender Country",
        "405": "Sanction Screening Score",
        "406": "Business Application Identifier",
        "408": "Special Condition Indicator",
        "409": "Business Tax ID",
        "410": "Individual Tax ID",
        "411": "Source of Funds",
        "412": "Sender Account Number",
        "413": "Sender Account Number Type",
        "414": "MVV",
        "415": "Sender Reference Number",
        "416": "Is AFD Transaction",
        "417": "Acquirer Fee Amount",
        "418": "Address Verification Result",
        "419": "Postal Code / ZIP Code",
        "420": "Street Address",
        "421": "Sender Date of Birth",
        "422": "OCT Activity Check Result",
        "423": "Sender Postal Code",
        "424": "Recipient City",
        "425": "Recipient Country",
        "900": "3D Secure OTP",
        "901": "Digitization Activation",
        "902": "Digitization Activation Method Type",
        "903": "Digitization Activation Method Value",
        "904": "Digitization Activation Expiry",
        "905": "Digitization Final Tokenization Decision",
        "906": "Device Name",
        "910": "Digitized Device ID",
        "911": "Digitized PAN Expiry",
        "912": "Digitized FPAN Masked",
        "913": "Token Unique Reference",
        "915": "Digitized Token Requestor ID",
        "916": "Visa Digitized PAN",
        "917": "Visa Token Type",
        "920": "POS Transaction Status",
        "921": "POS Transaction Security",
        "922": "POS Authorisation Lifecycle",
        "923": "Digitization Event Type",
        "924": "Digitization Event Reason Code",
        "925": "Supports Partial Auth",
        "929": "Digitization Path",
        "930": "Wallet Recommendation",
        "931": "Tokenization PAN Source",
        "932": "Unique Transaction Reference",
        "933": "Transaction Purpose",
        "934": "3D Secure OTP RefCode",
        "999": "Generic Key",
    }
)

# ISO 4217 numeric code -> alpha code, display name, flag.
CURRENCY_TABLE: Final[Mapping[str, CurrencyDetail]] = MappingProxyType(
    {
        # Major currencies
        "840": CurrencyDetail(iso_code="USD", display_name="US Dollar", flag_glyph="🇺🇸"),
        "978": CurrencyDetail(iso_code="EUR", display_name="Euro", flag_glyph="🇪🇺"),
        "826": CurrencyDetail(iso_code="GBP", display_name="Pound Sterling", flag_glyph="🇬🇧"),
        "392": CurrencyDetail(iso_code="JPY", display_name="Japanese Yen", flag_glyph="🇯🇵"),
        "756": CurrencyDetail(iso_code="CHF", display_name="Swiss Franc", flag_glyph="🇨🇭"),
        "124": CurrencyDetail(iso_code="CAD", display_name="Canadian Dollar", flag_glyph="🇨🇦"),
        "036": CurrencyDetail(iso_code="AUD", display_name="Australian Dollar", flag_glyph="🇦🇺"),
        "554": CurrencyDetail(iso_code="NZD", display_name="New Zealand Dollar", flag_glyph="🇳🇿"),
        "156": CurrencyDetail(iso_code="CNY", display_name="Chinese Yuan", flag_glyph="🇨🇳"),
        "356": CurrencyDetail(iso_code="INR", display_name="Indian Rupee", flag_glyph="🇮🇳"),

        # European currencies
        "752": CurrencyDetail(iso_code="SEK", display_name="Swedish Krona", flag_glyph="🇸🇪"),
        "578": CurrencyDetail(iso_code="NOK", display_name="Norwegian Krone", flag_glyph="🇳🇴"),
        "208": CurrencyDetail(iso_code="DKK", display_name="Danish Krone", flag_glyph="🇩🇰"),
        "985": CurrencyDetail(iso_code="PLN", display_name="Polish Zloty", flag_glyph="🇵🇱"),
        "203": CurrencyDetail(iso_code="CZK", display_name="Czech Koruna", flag_glyph="🇨🇿"),
        "348": CurrencyDetail(iso_code="HUF", display_name="Hungarian Forint", flag_glyph="🇭🇺"),
        "946": CurrencyDetail(iso_code="RON", display_name="Romanian Leu", flag_glyph="🇷🇴"),
        "975": CurrencyDetail(iso_code="BGN", display_name="Bulgarian Lev", flag_glyph="🇧🇬"),
        "191": CurrencyDetail(iso_code="HRK", display_name="Croatian Kuna", flag_glyph="🇭🇷"),
        "941": CurrencyDetail(iso_code="RSD", display_name="Serbian Dinar", flag_glyph="🇷🇸"),

        # Asia Pacific
        "702": CurrencyDetail(iso_code="SGD", display_name="Singapore Dollar", flag_glyph="🇸🇬"),
        "344": CurrencyDetail(iso_code="HKD", display_name="Hong Kong Dollar", flag_glyph="🇭🇰"),
        "410": CurrencyDetail(iso_code="KRW", display_name="Korean Won", flag_glyph="🇰🇷"),
        "764": CurrencyDetail(iso_code="THB", display_name="Thai Baht", flag_glyph="🇹🇭"),
        "458": CurrencyDetail(iso_code="MYR", display_name="Malaysian Ringgit", flag_glyph="🇲🇾"),
        "360": CurrencyDetail(iso_code="IDR", display_name="Indonesian Rupiah", flag_glyph="🇮🇩"),
        "608": CurrencyDetail(iso_code="PHP", display_name="Philippine Peso", flag_glyph="🇵🇭"),
        "704": CurrencyDetail(iso_code="VND", display_name="Vietnamese Dong", flag_glyph="🇻🇳"),
        "096": CurrencyDetail(iso_code="BND", display_name="Brunei Dollar", flag_glyph="🇧🇳"),

        # Americas
        "484": CurrencyDetail(iso_code="MXN", display_name="Mexican Peso", flag_glyph="🇲🇽"),
        "986": CurrencyDetail(iso_code="BRL", display_name="Brazilian Real", flag_glyph="🇧🇷"),
        "032": CurrencyDetail(iso_code="ARS", display_name="Argentine Peso", flag_glyph="🇦🇷"),
        "152": CurrencyDetail(iso_code="CLP", display_name="Chilean Peso", flag_glyph="🇨🇱"),
        "604": CurrencyDetail(iso_code="PEN", display_name="Peruvian Sol", flag_glyph="🇵🇪"),
        "170": CurrencyDetail(iso_code="COP", display_name="Colombian Peso", flag_glyph="🇨🇴"),
        "858": CurrencyDetail(iso_code="UYU", display_name="Uruguayan Peso", flag_glyph="🇺🇾"),
        "600": CurrencyDetail(iso_code="PYG", display_name="Paraguayan Guarani", flag_glyph="🇵🇾"),
        "068": CurrencyDetail(iso_code="BOB", display_name="Bolivian Boliviano", flag_glyph="🇧🇴"),
        "218": CurrencyDetail(iso_code="ECS", display_name="Ecuadorian Sucre", flag_glyph="🇪🇨"),

        # Middle East & Africa
        "784": CurrencyDetail(iso_code="AED", display_name="UAE Dirham", flag_glyph="🇦🇪"),
        "682": CurrencyDetail(iso_code="SAR", display_name="Saudi Riyal", flag_glyph="🇸🇦"),
        "376": CurrencyDetail(iso_code="ILS", display_name="Israeli New Shekel", flag_glyph="🇮🇱"),
        "818": CurrencyDetail(iso_code="EGP", display_name="Egyptian Pound", flag_glyph="🇪🇬"),
        "710": CurrencyDetail(iso_code="ZAR", display_name="South African Rand", flag_glyph="🇿🇦"),
        "566": CurrencyDetail(iso_code="NGN", display_name="Nigerian Naira", flag_glyph="🇳🇬"),
        "404": CurrencyDetail(iso_code="KES", display_name="Kenyan Shilling", flag_glyph="🇰🇪"),
        "788": CurrencyDetail(iso_code="TND", display_name="Tunisian Dinar", flag_glyph="🇹🇳"),
        "504": CurrencyDetail(iso_code="MAD", display_name="Moroccan Dirham", flag_glyph="🇲🇦"),
        "012": CurrencyDetail(iso_code="DZD", display_name="Algerian Dinar", flag_glyph="🇩🇿"),

        # Eastern Europe & CIS
        "643": CurrencyDetail(iso_code="RUB", display_name="Russian Ruble", flag_glyph="🇷🇺"),
        "980": CurrencyDetail(iso_code="UAH", display_name="Ukrainian Hryvnia", flag_glyph="🇺🇦"),
        "398": CurrencyDetail(iso_code="KZT", display_name="Kazakhstani Tenge", flag_glyph="🇰🇿"),
        "051": CurrencyDetail(iso_code="AMD", display_name="Armenian Dram", flag_glyph="🇦🇲"),
        "031": CurrencyDetail(iso_code="AZN", display_name="Azerbaijani Manat", flag_glyph="🇦🇿"),
        "934": CurrencyDetail(iso_code="TMT", display_name="Turkmenistani Manat", flag_glyph="🇹🇲"),
        "860": CurrencyDetail(iso_code="UZS", display_name="Uzbekistani Som", flag_glyph="🇺🇿"),
        "417": CurrencyDetail(iso_code="KGS", display_name="Kyrgyzstani Som", flag_glyph="🇰🇬"),
        "972": CurrencyDetail(iso_code="TJS", display_name="Tajikistani Somoni", flag_glyph="🇹🇯"),

        # Additional major currencies
        "949": CurrencyDetail(iso_code="TRY", display_name="Turkish Lira", flag_glyph="🇹🇷"),
        "364": CurrencyDetail(iso_code="IRR", display_name="Iranian Rial", flag_glyph="🇮🇷"),
        "368": CurrencyDetail(iso_code="IQD", display_name="Iraqi Dinar", flag_glyph="🇮🇶"),
        "414": CurrencyDetail(iso_code="KWD", display_name="Kuwaiti Dinar", flag_glyph="🇰🇼"),
        "048": CurrencyDetail(iso_code="BHD", display_name="Bahraini Dinar", flag_glyph="🇧🇭"),
        "634": CurrencyDetail(iso_code="QAR", display_name="Qatari Rial", flag_glyph="🇶🇦"),
        "512": CurrencyDetail(iso_code="OMR", display_name="Omani Rial", flag_glyph="🇴🇲"),
        "422": CurrencyDetail(iso_code="LBP", display_name="Lebanese Pound", flag_glyph="🇱🇧"),
        "400": CurrencyDetail(iso_code="JOD", display_name="Jordanian Dinar", flag_glyph="🇯🇴"),
    }
)


def lookup_field_name(key: str) -> str:
    """Return the directory name for ``key`` or ``"Unknown"`` when unregistered."""

    return FIELD_DIRECTORY.get(key, UNKNOWN_FIELD)


def lookup_currency(code: str) -> CurrencyDetail | None:
    return CURRENCY_TABLE.get(code.rjust(3, "0"))


def lookup_mcc(code: str) -> str | None:
    return MCC_TABLE.get(code.rjust(4, "0"))
