"""
Closed value sets used on the schedule detail page.

- Term: symbolic name (FALL2012) <-> link name sent to the server ("201310")
- Subject: subject code (CS) <-> subject title
- ScheduleType: symbolic name <-> display string ("Lecture")

Strings scraped from the page vary in case and spacing, so every lookup
normalizes with `normalize_key` (uppercase, spaces removed) before matching.
"""

from __future__ import annotations

from enum import Enum

from schedule_detail.errors import UnknownEnumValue


def normalize_key(text: str) -> str:
    return text.replace(" ", "").upper()


class Term(Enum):
    """
    Academic terms. The value is the term code the registration system
    expects ("<academic year end><10 fall | 20 spring | 30 summer>").
    """

    SPRING2012 = "201220"
    SUMMER2012 = "201230"
    FALL2012 = "201310"
    SPRING2013 = "201320"
    SUMMER2013 = "201330"
    FALL2013 = "201410"
    SPRING2014 = "201420"
    SUMMER2014 = "201430"
    FALL2014 = "201510"
    SPRING2015 = "201520"
    SUMMER2015 = "201530"
    FALL2015 = "201610"
    SPRING2016 = "201620"
    SUMMER2016 = "201630"
    FALL2016 = "201710"
    SPRING2017 = "201720"
    SUMMER2017 = "201730"
    FALL2017 = "201810"
    SPRING2018 = "201820"
    SUMMER2018 = "201830"
    FALL2018 = "201910"
    SPRING2019 = "201920"
    SUMMER2019 = "201930"
    FALL2019 = "202010"
    SPRING2020 = "202020"
    SUMMER2020 = "202030"
    FALL2020 = "202110"
    SPRING2021 = "202120"
    SUMMER2021 = "202130"
    FALL2021 = "202210"
    SPRING2022 = "202220"
    SUMMER2022 = "202230"
    FALL2022 = "202310"
    SPRING2023 = "202320"
    SUMMER2023 = "202330"
    FALL2023 = "202410"
    SPRING2024 = "202420"
    SUMMER2024 = "202430"
    FALL2024 = "202510"
    SPRING2025 = "202520"
    SUMMER2025 = "202530"
    FALL2025 = "202610"
    SPRING2026 = "202620"
    SUMMER2026 = "202630"
    FALL2026 = "202710"
    SPRING2027 = "202720"
    SUMMER2027 = "202730"
    FALL2027 = "202810"

    # alias of the term that is open for registration
    CURRENT = "202710"

    @property
    def link_name(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        for season in ("SPRING", "SUMMER", "FALL"):
            if self.name.startswith(season):
                return f"{season.capitalize()} {self.name[len(season):]}"
        return self.name

    @classmethod
    def from_display(cls, text: str) -> "Term":
        """
        "Fall 2012" / "FALL2012" / "fall 2012" -> Term.FALL2012
        """
        key = normalize_key(text)
        try:
            return cls[key]
        except KeyError:
            raise UnknownEnumValue(cls.__name__, text) from None

    @classmethod
    def from_link_name(cls, link_name: str) -> "Term":
        try:
            return cls(link_name.strip())
        except ValueError:
            raise UnknownEnumValue(cls.__name__, link_name) from None


class Subject(Enum):
    """
    Subject codes as printed in the course heading ("CS 18000").
    """

    AAE = "Aeronautics & Astronautics"
    AAS = "African American Studies"
    ABE = "Agricultural & Biological Engineering"
    AD = "Art & Design"
    AFT = "Aerospace Studies"
    AGEC = "Agricultural Economics"
    AGR = "Agriculture"
    AGRY = "Agronomy"
    AMST = "American Studies"
    ANSC = "Animal Sciences"
    ANTH = "Anthropology"
    ARAB = "Arabic"
    ASAM = "Asian American Studies"
    ASL = "American Sign Language"
    ASM = "Agricultural Systems Management"
    ASTR = "Astronomy"
    AT = "Aviation Technology"
    BAND = "Bands"
    BCHM = "Biochemistry"
    BIOL = "Biological Sciences"
    BME = "Biomedical Engineering"
    BMS = "Basic Medical Sciences"
    BTNY = "Botany & Plant Pathology"
    CAND = "Candidate"
    CE = "Civil Engineering"
    CEM = "Construction Engineering & Management"
    CGT = "Computer Graphics Technology"
    CHE = "Chemical Engineering"
    CHM = "Chemistry"
    CHNS = "Chinese"
    CLCS = "Classics"
    CLPH = "Clinical Pharmacy"
    CMPL = "Comparative Literature"
    CNIT = "Computer & Information Technology"
    COM = "Communication"
    CPB = "Comparative Pathobiology"
    CS = "Computer Sciences"
    CSR = "Consumer Science & Retailing"
    DANC = "Dance"
    EAPS = "Earth, Atmospheric & Planetary Sciences"
    ECE = "Electrical & Computer Engineering"
    ECET = "Electrical & Computer Engineering Technology"
    ECON = "Economics"
    EDCI = "Educational Curriculum & Instruction"
    EDPS = "Educational Leadership & Cultural Foundations"
    EDST = "Educational Studies"
    EEE = "Environmental & Ecological Engineering"
    ENE = "Engineering Education"
    ENGL = "English"
    ENGR = "First Year Engineering"
    ENTM = "Entomology"
    ENTR = "Entrepreneurship"
    EPCS = "Engineering Projects In Community Service"
    FNR = "Forestry & Natural Resources"
    FR = "French"
    FS = "Food Science"
    FVS = "Film & Video Studies"
    GEP = "Global Engineering Program"
    GER = "German"
    GRAD = "Graduate Studies"
    GREK = "Greek"
    GS = "General Studies"
    HDFS = "Human Development & Family Studies"
    HEBR = "Hebrew"
    HHS = "College Health & Human Sciences"
    HIST = "History"
    HK = "Health & Kinesiology"
    HONR = "Honors"
    HORT = "Horticulture"
    HSCI = "Health Sciences"
    HSOP = "Health Sciences Op"
    HTM = "Hospitality & Tourism Management"
    IDE = "Interdisciplinary Engineering"
    IDIS = "Interdisciplinary Studies"
    IE = "Industrial Engineering"
    IET = "Industrial Engineering Technology"
    IPPH = "Industrial & Physical Pharmacy"
    IT = "Industrial Technology"
    ITAL = "Italian"
    JPNS = "Japanese"
    JWST = "Jewish Studies"
    LA = "Landscape Architecture"
    LALS = "Latina Am & Latino Studies"
    LATN = "Latin"
    LC = "Languages & Cultures"
    LING = "Linguistics"
    MA = "Mathematics"
    MARS = "Medieval & Renaissance Studies"
    MCMP = "Medicinal Chemistry & Molecular Pharmacology"
    ME = "Mechanical Engineering"
    MET = "Mechanical Engineering Technology"
    MFET = "Manufacturing Engineering Technology"
    MGMT = "Management"
    MSE = "Materials Engineering"
    MSL = "Military Science & Leadership"
    MUS = "Music History & Theory"
    NRES = "Natural Resources & Environmental Science"
    NS = "Naval Science"
    NUCL = "Nuclear Engineering"
    NUPH = "Nuclear Pharmacy"
    NUR = "Nursing"
    NUTR = "Nutrition Science"
    OBHR = "Organizational Behavior & Human Resources"
    OLS = "Organizational Leadership & Supervision"
    PHIL = "Philosophy"
    PHPR = "Pharmacy Practice"
    PHRM = "Pharmacy"
    PHYS = "Physics"
    POL = "Political Science"
    PSY = "Psychology"
    PTGS = "Portuguese"
    REL = "Religious Studies"
    RUSS = "Russian"
    SA = "Study Abroad"
    SCI = "General Science"
    SLHS = "Speech, Language & Hearing Sciences"
    SOC = "Sociology"
    SPAN = "Spanish"
    STAT = "Statistics"
    TECH = "Technology"
    THTR = "Theatre"
    TLI = "Technology Leadership & Innovation"
    VCS = "Veterinary Clinical Sciences"
    VM = "Veterinary Medicine"
    WOST = "Women's Studies"

    @property
    def code(self) -> str:
        return self.name

    @classmethod
    def from_code(cls, code: str) -> "Subject":
        key = normalize_key(code)
        try:
            return cls[key]
        except KeyError:
            raise UnknownEnumValue(cls.__name__, code) from None


class ScheduleType(Enum):
    """
    Instructional format of a section, as shown in "<type> Schedule Type".
    """

    CLINIC = "Clinic"
    DISTANCE_LEARNING = "Distance Learning"
    EXPERIENTIAL = "Experiential"
    INDIVIDUAL_STUDY = "Individual Study"
    LABORATORY = "Laboratory"
    LABORATORY_PREPARATION = "Laboratory Preparation"
    LECTURE = "Lecture"
    PRACTICE_STUDY_OBSERVATION = "Practice Study Observation"
    PRESENTATION = "Presentation"
    RECITATION = "Recitation"
    RESEARCH = "Research"
    STUDIO = "Studio"
    TRAVEL_TIME = "Travel Time"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display(cls, text: str) -> "ScheduleType":
        key = normalize_key(text)
        for member in cls:
            if normalize_key(member.value) == key or member.name.replace("_", "") == key:
                return member
        raise UnknownEnumValue(cls.__name__, text)
