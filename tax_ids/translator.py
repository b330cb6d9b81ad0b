"""English names for the fields of the Norwegian entity register (BRREG).

https://data.brreg.no/enhetsregisteret/api/dokumentasjon/no/index.html#tag/Enheter/operation/hentEnhet
"""

from collections.abc import Mapping
from types import MappingProxyType

from .verification import JSON

# fmt:off
TRANSLATIONS = MappingProxyType({
    "organisasjonsnummer": "organizationNumber",
    "navn": "name",
    "organisasjonsform": "organizationForm",
    "kode": "code",
    "beskrivelse": "description",
    "hjemmeside": "website",
    "epostadresse": "emailAddress",
    "telefon": "telephone",
    "mobil": "mobile",
    "postadresse": "postalAddress",
    "forretningsadresse": "businessAddress",
    "beliggenhetsadresse": "locationAddress",
    "adresse": "address",
    "land": "country",
    "landkode": "countryCode",
    "postnummer": "postalCode",
    "poststed": "postalPlace",
    "kommune": "municipality",
    "kommunenummer": "municipalityNumber",
    "registreringsdatoEnhetsregisteret": "registrationDateEntityRegister",
    "registrertIMvaregisteret": "registeredInVatRegister",
    "registreringsdatoMerverdiavgiftsregisteret": "registrationDateVatRegister",
    "frivilligMvaRegistrertBeskrivelser": "voluntaryVatRegisteredDescriptions",
    "naeringskode1": "industryCode1",
    "naeringskode2": "industryCode2",
    "naeringskode3": "industryCode3",
    "hjelpeenhetskode": "auxiliaryUnitCode",
    "antallAnsatte": "numberOfEmployees",
    "harRegistrertAntallAnsatte": "hasRegisteredNumberOfEmployees",
    "overordnetEnhet": "parentEntity",
    "institusjonellSektorkode": "institutionalSectorCode",
    "registrertIForetaksregisteret": "registeredInBusinessRegister",
    "registrertIStiftelsesregisteret": "registeredInFoundationRegister",
    "registrertIFrivillighetsregisteret": "registeredInVoluntaryRegister",
    "registrertIPartiregisteret": "registeredInPartyRegister",
    "sisteInnsendteAarsregnskap": "lastSubmittedAnnualAccounts",
    "konkurs": "bankruptcy",
    "konkursdato": "bankruptcyDate",
    "underAvvikling": "underLiquidation",
    "underAvviklingDato": "liquidationDate",
    "underTvangsavviklingEllerTvangsopplosning": "underForcedLiquidation",
    "tvangsavvikletPgaManglendeSlettingDato": "forcedLiquidationMissingDeletionDate",
    "tvangsopplostPgaManglendeDagligLederDato": "forcedDissolutionMissingManagerDate",
    "tvangsopplostPgaManglendeRevisorDato": "forcedDissolutionMissingAuditorDate",
    "tvangsopplostPgaManglendeRegnskapDato": "forcedDissolutionMissingAccountsDate",
    "tvangsopplostPgaMangelfulltStyreDato": "forcedDissolutionDeficientBoardDate",
    "maalform": "languageForm",
    "stiftelsesdato": "foundationDate",
    "vedtektsdato": "articlesOfAssociationDate",
    "vedtektsfestetFormaal": "statutoryPurpose",
    "aktivitet": "activity",
    "slettedato": "deletionDate",
    "utgaatt": "expired",
})
# fmt:on


def translate_keys(data: JSON, translations: Mapping[str, str] = TRANSLATIONS) -> JSON:
    """Rename the keys of every object in ``data``, depth first.

    Unknown keys are kept as they are. Arrays are translated element by element
    and scalars are returned unchanged.

    Examples:
        >>> translate_keys({"navn": "Test AS", "forretningsadresse": {"poststed": "OSLO"}})
        {'name': 'Test AS', 'businessAddress': {'postalPlace': 'OSLO'}}
        >>> translate_keys([{"konkurs": False}, "konkurs"])
        [{'bankruptcy': False}, 'konkurs']
        >>> translate_keys({"_links": {"self": {"href": "..."}}})
        {'_links': {'self': {'href': '...'}}}

    """
    if isinstance(data, dict):
        return {
            translations.get(key, key): translate_keys(value, translations)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [translate_keys(value, translations) for value in data]
    return data
