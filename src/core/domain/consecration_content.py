"""
Consecration Content - the reading for each of the 34 days and the prayers
said in each phase.

AICODE-NOTE: Static data plus lookups, no DB. Prayers belong to the phase,
not to the day: every day of a phase says the same set (PHASE_PRAYERS).
Days without a written meditation carry meditation_text=None; the title,
source and journal prompt are always set.
"""

from dataclasses import dataclass

from src.core.domain.bilingual import BilingualText, DisplayMode, format_bilingual
from src.core.domain.consecration import TOTAL_DAYS, ConsecrationPhase, phase_for_day

_ORDINALS = (
    "First", "Second", "Third", "Fourth", "Fifth",
    "Sixth", "Seventh", "Eighth", "Ninth", "Tenth",
    "Eleventh", "Twelfth", "Thirteenth", "Fourteenth", "Fifteenth",
    "Sixteenth", "Seventeenth", "Eighteenth", "Nineteenth", "Twentieth",
    "Twenty-First", "Twenty-Second", "Twenty-Third", "Twenty-Fourth", "Twenty-Fifth",
    "Twenty-Sixth", "Twenty-Seventh", "Twenty-Eighth", "Twenty-Ninth", "Thirtieth",
    "Thirty-First", "Thirty-Second", "Thirty-Third", "Thirty-Fourth",
)  # fmt: skip


@dataclass(frozen=True)
class ConsecrationPrayer:
    """A consecration prayer; latin=None for English-only prayers (litanies)."""

    prayer_id: str
    title: str
    english: str
    latin_title: str | None = None
    latin: str | None = None

    def formatted(self, mode: DisplayMode) -> str:
        if self.latin is None:
            return self.english
        return format_bilingual(BilingualText(primary=self.english, secondary=self.latin), mode)

    def display_title(self, mode: DisplayMode) -> str:
        if self.latin_title is None or mode == DisplayMode.primary_only:
            return self.title
        if mode == DisplayMode.secondary_only:
            return self.latin_title
        return f"{self.title} ({self.latin_title})"


@dataclass(frozen=True)
class ConsecrationDay:
    day_number: int
    title: str
    meditation_title: str
    journal_prompt: str
    meditation_text: str | None = None
    meditation_source: str | None = None

    @property
    def phase(self) -> ConsecrationPhase:
        phase = phase_for_day(self.day_number)
        assert phase is not None
        return phase

    @property
    def day_label(self) -> str:
        """'Day 7 of 33', or 'Consecration Day' for day 34."""
        if self.day_number == TOTAL_DAYS:
            return "Consecration Day"
        return f"Day {self.day_number} of {TOTAL_DAYS - 1}"

    @property
    def ordinal_label(self) -> str:
        return f"{_ORDINALS[self.day_number - 1]} Day"

    @property
    def day_within_phase(self) -> int:
        return self.day_number - self.phase.day_range.start + 1


CONSECRATION_PRAYERS: dict[str, ConsecrationPrayer] = {
    prayer.prayer_id: prayer
    for prayer in (
        ConsecrationPrayer(
            "veni_creator",
            "Come, Creator Spirit",
            english=(
                "Come, Holy Spirit, Creator blest,\n"
                "and in our souls take up Thy rest;\n"
                "come with Thy grace and heavenly aid\n"
                "to fill the hearts which Thou hast made.\n"
                "O comforter, to Thee we cry,\n"
                "O heavenly gift of God Most High,\n"
                "O fount of life and fire of love,\n"
                "and sweet anointing from above.\n"
                "Kindle our senses from above,\n"
                "and make our hearts o'erflow with love;\n"
                "with patience firm and virtue high\n"
                "the weakness of our flesh supply.\n"
                "Oh, may Thy grace on us bestow\n"
                "the Father and the Son to know;\n"
                "and Thee, through endless times confessed,\n"
                "of both the eternal Spirit blest.\n"
                "Amen."
            ),
            latin_title="Veni Creator Spiritus",
            latin=(
                "Veni, Creator Spiritus,\n"
                "mentes tuorum visita,\n"
                "imple superna gratia\n"
                "quae tu creasti pectora.\n"
                "Qui diceris Paraclitus,\n"
                "altissimi donum Dei,\n"
                "fons vivus, ignis, caritas,\n"
                "et spiritalis unctio.\n"
                "Accende lumen sensibus,\n"
                "infunde amorem cordibus,\n"
                "infirma nostri corporis\n"
                "virtute firmans perpeti.\n"
                "Da tuis fidelibus,\n"
                "in te confidentibus,\n"
                "sacrum septenarium,\n"
                "da virtutum omnium.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "ave_maris_stella",
            "Hail, Star of the Sea",
            english=(
                "Hail, O Star of the ocean,\n"
                "God's own Mother blest,\n"
                "ever sinless Virgin,\n"
                "gate of heav'nly rest.\n"
                "Show thyself a Mother,\n"
                "may the Word divine\n"
                "born for us thine Infant\n"
                "hear our prayers through thine.\n"
                "Keep our life all spotless,\n"
                "make our way secure\n"
                "till we find in Jesus,\n"
                "joy for evermore.\n"
                "Amen."
            ),
            latin_title="Ave Maris Stella",
            latin=(
                "Ave, maris stella,\n"
                "Dei Mater alma,\n"
                "atque semper Virgo,\n"
                "felix caeli porta.\n"
                "Monstra te esse matrem,\n"
                "sumat per te preces\n"
                "qui pro nobis natus\n"
                "tulit esse tuus.\n"
                "Vitam praesta puram,\n"
                "iter para tutum,\n"
                "ut videntes Jesum\n"
                "semper collaetemur.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "magnificat",
            "The Canticle of Mary",
            english=(
                "My soul doth magnify the Lord.\n"
                "\n"
                "And my spirit hath rejoiced in God my Savior.\n"
                "\n"
                "Because He hath regarded the humility of his handmaid.\n"
                "\n"
                "Because He that is mighty hath done great things to me.\n"
                "\n"
                "And holy is His name.\n"
                "\n"
                "Glory be to the Father, and to the Son, and to the Holy Spirit.\n"
                "\n"
                "As it was in the beginning, is now, and ever shall be, world without end.\n"
                "\n"
                "Amen."
            ),
            latin_title="Magnificat",
            latin=(
                "Magnificat anima mea Dominum.\n"
                "\n"
                "Et exsultavit spiritus meus in Deo salutari meo.\n"
                "\n"
                "Quia respexit humilitatem ancillae suae.\n"
                "\n"
                "Quia fecit mihi magna qui potens est.\n"
                "\n"
                "Et sanctum nomen eius.\n"
                "\n"
                "Gloria Patri, et Filio, et Spiritui Sancto.\n"
                "\n"
                "Sicut erat in principio, et nunc, et semper, et in saecula saeculorum.\n"
                "\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "glory_be",
            "Glory Be",
            english=(
                "Glory be to the Father,\n"
                "and to the Son,\n"
                "and to the Holy Spirit.\n"
                "As it was in the beginning,\n"
                "is now, and ever shall be,\n"
                "world without end.\n"
                "\n"
                "Amen."
            ),
            latin_title="Gloria Patri",
            latin=(
                "Gloria Patri,\n"
                "et Filio,\n"
                "et Spiritui Sancto.\n"
                "Sicut erat in principio,\n"
                "et nunc, et semper,\n"
                "et in saecula saeculorum.\n"
                "\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "litany_holy_ghost",
            "Litany of the Holy Ghost",
            english=(
                "Lord, have mercy on us.\n"
                "Christ, have mercy on us.\n"
                "Lord, have mercy on us.\n"
                "Father all powerful, have mercy on us.\n"
                "Jesus, Eternal Son of the Father, Redeemer of the world, save us.\n"
                "Spirit of the Father and the Son, boundless life of both, sanctify us.\n"
                "Holy Trinity, hear us.\n"
                "Holy Ghost, Who proceedest from the Father and the Son, enter our hearts.\n"
                "Holy Ghost, Who art equal to the Father and the Son, enter our hearts.\n"
                "Promise of God the Father, have mercy on us.\n"
                "Ray of heavenly light, have mercy on us.\n"
                "Author of all good, have mercy on us.\n"
                "Source of heavenly water, have mercy on us.\n"
                "Consuming fire, have mercy on us.\n"
                "Ardent charity, have mercy on us.\n"
                "Spiritual unction, have mercy on us.\n"
                "Spirit of love and truth, have mercy on us.\n"
                "Spirit of wisdom and understanding, have mercy on us.\n"
                "Spirit of counsel and fortitude, have mercy on us.\n"
                "Spirit of knowledge and piety, have mercy on us.\n"
                "Spirit of the fear of the Lord, have mercy on us.\n"
                "Spirit of grace and prayer, have mercy on us.\n"
                "Spirit of peace and meekness, have mercy on us.\n"
                "Spirit of modesty and innocence, have mercy on us.\n"
                "Holy Ghost, the Comforter, have mercy on us.\n"
                "Holy Ghost, the Sanctifier, have mercy on us.\n"
                "Holy Ghost, Who governest the Church, have mercy on us.\n"
                "Gift of God, the Most High, have mercy on us.\n"
                "Spirit Who fillest the universe, have mercy on us.\n"
                "Spirit of the adoption of the children of God, have mercy on us.\n"
                "Holy Ghost, inspire us with horror of sin.\n"
                "Holy Ghost, come and renew the face of the earth.\n"
                "Holy Ghost, shed Thy light in our souls.\n"
                "Holy Ghost, engrave Thy law in our hearts.\n"
                "Holy Ghost, inflame us with the flame of Thy love.\n"
                "Holy Ghost, open to us the treasures of Thy graces.\n"
                "Holy Ghost, teach us to pray well.\n"
                "Holy Ghost, enlighten us with Thy heavenly inspirations.\n"
                "Holy Ghost, lead us in the way of salvation.\n"
                "Holy Ghost, grant us the only necessary knowledge.\n"
                "Holy Ghost, inspire in us the practice of good.\n"
                "Holy Ghost, grant us the merits of all virtues.\n"
                "Holy Ghost, make us persevere in justice.\n"
                "Holy Ghost, be Thou our everlasting reward.\n"
                "Lamb of God, Who takest away the sins of the world, send us Thy Holy Ghost.\n"
                "Lamb of God, Who takest away the sins of the world, "
                "pour down into our souls the gifts of the Holy Ghost.\n"
                "Lamb of God, Who takest away the sins of the world, "
                "grant us the Spirit of wisdom and piety.\n"
                "V. Come, Holy Ghost! Fill the hearts of Thy faithful,\n"
                "R. And enkindle in them the fire of Thy love.\n"
                "Let us pray.\n"
                "Grant, O merciful Father, that Thy Divine Spirit may enlighten, "
                "inflame and purify us, that He may penetrate us with His heavenly dew "
                "and make us fruitful in good works, through Our Lord Jesus Christ, "
                "Thy Son, Who with Thee, in the unity of the same Spirit, "
                "liveth and reigneth, one God, world without end.\n"
                "R. Amen."
            ),
        ),
        ConsecrationPrayer(
            "litany_loreto",
            "Litany of the Blessed Virgin Mary",
            english=(
                "Lord, have mercy on us. Christ, have mercy on us.\n"
                "Lord, have mercy on us. Christ, hear us. Christ, graciously hear us.\n"
                "God the Father of Heaven, have mercy on us.\n"
                "God the Son, Redeemer of the world, have mercy on us.\n"
                "God the Holy Ghost, have mercy on us.\n"
                "Holy Trinity, One God, have mercy on us.\n"
                "Holy Mary, pray for us.\n"
                "Holy Mother of God, pray for us.\n"
                "Holy Virgin of virgins, pray for us.\n"
                "Mother of Christ, pray for us.\n"
                "Mother of divine grace, pray for us.\n"
                "Mother most pure, pray for us.\n"
                "Mother most chaste, pray for us.\n"
                "Mother inviolate, pray for us.\n"
                "Mother undefiled, pray for us.\n"
                "Mother most amiable, pray for us.\n"
                "Mother most admirable, pray for us.\n"
                "Mother of good counsel, pray for us.\n"
                "Mother of our Creator, pray for us.\n"
                "Mother of our Saviour, pray for us.\n"
                "Mother of the Church, pray for us.\n"
                "Virgin most prudent, pray for us.\n"
                "Virgin most venerable, pray for us.\n"
                "Virgin most renowned, pray for us.\n"
                "Virgin most powerful, pray for us.\n"
                "Virgin most merciful, pray for us.\n"
                "Virgin most faithful, pray for us.\n"
                "Mirror of justice, pray for us.\n"
                "Seat of wisdom, pray for us.\n"
                "Cause of our joy, pray for us.\n"
                "Vessel of honor, pray for us.\n"
                "Singular vessel of devotion, pray for us.\n"
                "Mystical rose, pray for us.\n"
                "Tower of David, pray for us.\n"
                "Tower of ivory, pray for us.\n"
                "House of gold, pray for us.\n"
                "Ark of the covenant, pray for us.\n"
                "Gate of Heaven, pray for us.\n"
                "Morning star, pray for us.\n"
                "Health of the sick, pray for us.\n"
                "Refuge of sinners, pray for us.\n"
                "Comforter of the afflicted, pray for us.\n"
                "Help of Christians, pray for us.\n"
                "Queen of angels, pray for us.\n"
                "Queen of patriarchs, pray for us.\n"
                "Queen of prophets, pray for us.\n"
                "Queen of Apostles, pray for us.\n"
                "Queen of martyrs, pray for us.\n"
                "Queen of confessors, pray for us.\n"
                "Queen of virgins, pray for us.\n"
                "Queen of all saints, pray for us.\n"
                "Queen conceived without Original Sin, pray for us.\n"
                "Queen assumed into Heaven, pray for us.\n"
                "Queen of the most holy Rosary, pray for us.\n"
                "Queen of peace, pray for us.\n"
                "Lamb of God, Who takest away the sins of the world, spare us, O Lord.\n"
                "Lamb of God, Who takest away the sins of the world, "
                "graciously hear us, O Lord.\n"
                "Lamb of God, Who takest away the sins of the world, have mercy on us.\n"
                "V. Pray for us, O holy Mother of God,\n"
                "R. That we may be made worthy of the promises of Christ.\n"
                "Let us pray.\n"
                "Grant, we beseech Thee, O Lord God, unto us Thy servants, that we may "
                "rejoice in continual health of mind and body, and by the glorious "
                "intercession of Blessed Mary, ever virgin, may be delivered from "
                "present sadness, and enter into the joy of eternal gladness. "
                "Through Christ our Lord.\n"
                "R. Amen."
            ),
            latin_title="Litaniae Lauretanae",
        ),
        ConsecrationPrayer(
            "litany_holy_name",
            "Litany of the Holy Name of Jesus",
            english=(
                "Lord, have mercy on us.\n"
                "Christ, have mercy on us.\n"
                "Lord, have mercy on us. Jesus, hear us.\n"
                "Jesus, graciously hear us.\n"
                "God the Father of Heaven, have mercy on us.\n"
                "God the Son, Redeemer of the world, have mercy on us.\n"
                "God the Holy Ghost, have mercy on us.\n"
                "Holy Trinity, One God, have mercy on us.\n"
                "Jesus, Son of the living God, have mercy on us.\n"
                "Jesus, splendor of the Father, have mercy on us.\n"
                "Jesus, brightness of eternal light, have mercy on us.\n"
                "Jesus, King of glory, have mercy on us.\n"
                "Jesus, sun of justice, have mercy on us.\n"
                "Jesus, Son of the Virgin Mary, have mercy on us.\n"
                "Jesus, most amiable, have mercy on us.\n"
                "Jesus, most admirable, have mercy on us.\n"
                "Jesus, mighty God, have mercy on us.\n"
                "Jesus, Father of the world to come, have mercy on us.\n"
                "Jesus, angel of great counsel, have mercy on us.\n"
                "Jesus, most powerful, have mercy on us.\n"
                "Jesus, most patient, have mercy on us.\n"
                "Jesus, most obedient, have mercy on us.\n"
                "Jesus, meek and humble, have mercy on us.\n"
                "Jesus, lover of chastity, have mercy on us.\n"
                "Jesus, lover of us, have mercy on us.\n"
                "Jesus, God of peace, have mercy on us.\n"
                "Jesus, author of life, have mercy on us.\n"
                "Jesus, model of virtues, have mercy on us.\n"
                "Jesus, lover of souls, have mercy on us.\n"
                "Jesus, our God, have mercy on us.\n"
                "Jesus, our refuge, have mercy on us.\n"
                "Jesus, Father of the poor, have mercy on us.\n"
                "Jesus, treasure of the faithful, have mercy on us.\n"
                "Jesus, Good Shepherd, have mercy on us.\n"
                "Jesus, true light, have mercy on us.\n"
                "Jesus, eternal wisdom, have mercy on us.\n"
                "Jesus, infinite goodness, have mercy on us.\n"
                "Jesus, our way and our life, have mercy on us.\n"
                "Jesus, joy of angels, have mercy on us.\n"
                "Jesus, King of patriarchs, have mercy on us.\n"
                "Jesus, master of Apostles, have mercy on us.\n"
                "Jesus, teacher of Evangelists, have mercy on us.\n"
                "Jesus, strength of martyrs, have mercy on us.\n"
                "Jesus, light of confessors, have mercy on us.\n"
                "Jesus, purity of virgins, have mercy on us.\n"
                "Jesus, crown of all saints, have mercy on us.\n"
                "Be merciful, spare us, O Jesus.\n"
                "Be merciful, graciously hear us, O Jesus.\n"
                "From all evil, Jesus, deliver us.\n"
                "From all sin, Jesus, deliver us.\n"
                "From Thy wrath, Jesus, deliver us.\n"
                "From the snares of the devil, Jesus, deliver us.\n"
                "From everlasting death, Jesus, deliver us.\n"
                "From the neglect of Thine inspirations, Jesus, deliver us.\n"
                "Through the mystery of Thy holy Incarnation, Jesus, deliver us.\n"
                "Through Thy nativity, Jesus, deliver us.\n"
                "Through Thy most divine life, Jesus, deliver us.\n"
                "Through Thine agony and Passion, Jesus, deliver us.\n"
                "Through Thy cross and dereliction, Jesus, deliver us.\n"
                "Through Thy death and burial, Jesus, deliver us.\n"
                "Through Thy Resurrection, Jesus, deliver us.\n"
                "Through Thine Ascension, Jesus, deliver us.\n"
                "Through Thine institution of the most Holy Eucharist, Jesus, deliver us.\n"
                "Through Thy joys, Jesus, deliver us.\n"
                "Through Thy glory, Jesus, deliver us.\n"
                "Lamb of God, Who takest away the sins of the world, spare us, O Jesus.\n"
                "Lamb of God, Who takest away the sins of the world, "
                "graciously hear us, O Jesus.\n"
                "Lamb of God, Who takest away the sins of the world, have mercy on us.\n"
                "Jesus, hear us.\n"
                "Jesus, graciously hear us.\n"
                "Let us pray.\n"
                "Give us, O Lord, a perpetual fear and love of Thy holy Name; "
                "for Thou never failest to govern those whom Thou dost solidly "
                "establish in Thy love, Who livest and reignest world without end.\n"
                "R. Amen."
            ),
        ),
        ConsecrationPrayer(
            "st_louis_prayer_mary",
            "St. Louis de Montfort's Prayer to Mary",
            english=(
                "Hail Mary, beloved Daughter of the Eternal Father! "
                "Hail Mary, admirable Mother of the Son! "
                "Hail Mary, faithful spouse of the Holy Ghost! "
                "Hail Mary, my dear Mother, my loving Mistress, my powerful sovereign! "
                "I am all thine and all that I have is thine.\n"
                "May the light of thy faith dispel the darkness of my mind; "
                "may thy profound humility take the place of my pride; "
                "may thy sublime contemplation check the distractions of my "
                "wandering imagination; may thy continuous sight of God fill my "
                "memory with His presence; may the burning love of thy heart "
                "inflame the lukewarmness of mine.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "st_louis_prayer_jesus",
            "St. Louis de Montfort's Prayer to Jesus",
            english=(
                "O most loving Jesus, deign to let me pour forth my gratitude before "
                "Thee, for the grace Thou hast bestowed upon me in giving me to Thy "
                "holy Mother through the devotion of Holy Bondage, that she may be "
                "my advocate in the presence of Thy majesty and my support in my "
                "extreme misery.\n"
                "O Holy Spirit, grant me all these graces. Plant in my soul the Tree "
                "of true Life, which is Mary; cultivate it and tend it so that it "
                "may grow and blossom and bring forth the fruit of life in abundance.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "o_jesus_living_in_mary",
            "O Jesus Living in Mary",
            english=(
                "O Jesus living in Mary,\n"
                "Come and live in Thy servants,\n"
                "In the spirit of Thy holiness,\n"
                "In the fullness of Thy might,\n"
                "In the truth of Thy virtues,\n"
                "In the perfection of Thy ways,\n"
                "In the communion of Thy mysteries;\n"
                "Subdue every hostile power\n"
                "In Thy spirit, for the glory of the Father.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "act_of_consecration",
            "Act of Consecration",
            english=(
                "I, a faithless sinner, renew and ratify today in thy hands, "
                "O Immaculate Mother, the vows of my Baptism; I renounce forever "
                "Satan, his pomps and works; and I give myself entirely to Jesus "
                "Christ, the Incarnate Wisdom, to carry my cross after Him all the "
                "days of my life, and to be more faithful to Him than I have ever "
                "been before.\n"
                "In the presence of all the heavenly court I choose thee this day "
                "for my Mother and Mistress. I deliver and consecrate to thee, as "
                "thy slave, my body and soul, my goods, both interior and exterior, "
                "and even the value of all my good actions, past, present and "
                "future; leaving to thee the entire and full right of disposing of "
                "me, and all that belongs to me, without exception, according to "
                "thy good pleasure, for the greater glory of God, in time and in "
                "eternity.\n"
                "Amen."
            ),
        ),
        ConsecrationPrayer(
            "rosary",
            "The Holy Rosary",
            english=(
                "Pray at least five decades of the Rosary, meditating on the "
                "mysteries of the day."
            ),
            latin_title="Sanctissimum Rosarium",
        ),
    )
}

PHASE_PRAYERS: dict[ConsecrationPhase, tuple[str, ...]] = {
    ConsecrationPhase.preparatory: (
        "veni_creator",
        "ave_maris_stella",
        "magnificat",
        "glory_be",
    ),
    ConsecrationPhase.knowledge_of_self: (
        "litany_holy_ghost",
        "litany_loreto",
        "ave_maris_stella",
    ),
    ConsecrationPhase.knowledge_of_mary: (
        "litany_holy_ghost",
        "litany_loreto",
        "ave_maris_stella",
        "st_louis_prayer_mary",
        "rosary",
    ),
    ConsecrationPhase.knowledge_of_jesus: (
        "litany_holy_ghost",
        "ave_maris_stella",
        "litany_holy_name",
        "st_louis_prayer_jesus",
        "o_jesus_living_in_mary",
    ),
    ConsecrationPhase.consecration_day: ("act_of_consecration",),
}


def prayers_for_phase(phase: ConsecrationPhase) -> list[ConsecrationPrayer]:
    return [CONSECRATION_PRAYERS[prayer_id] for prayer_id in PHASE_PRAYERS[phase]]


def _written_days() -> list[ConsecrationDay]:
    """Days 1-7 carry their full reading."""
    douay = "Douay-Rheims Bible"
    kempis = "Thomas à Kempis"
    return [
        ConsecrationDay(
            1,
            "The Spirit of the World",
            "Matthew 5:1-19",
            "What worldly attachments or attitudes do you need to release "
            "to follow Christ more fully?",
            meditation_text=(
                "Blessed are the poor in spirit: for theirs is the kingdom of heaven. "
                "Blessed are the meek: for they shall possess the land. "
                "Blessed are they that mourn: for they shall be comforted. "
                "Blessed are they that hunger and thirst after justice: "
                "for they shall have their fill.\n\n"
                "You are the salt of the earth. But if the salt lose its savour, "
                "wherewith shall it be salted? You are the light of the world. "
                "A city seated on a mountain cannot be hid."
            ),
            meditation_source=douay,
        ),
        ConsecrationDay(
            2,
            "Seeking God's Approval",
            "Matthew 5:48, 6:1-15",
            "Do you seek God's approval or the approval of others? "
            "How can you practice charity and prayer in secret?",
            meditation_text=(
                "Be you therefore perfect, as also your heavenly Father is perfect.\n\n"
                "Take heed that you do not your justice before men, to be seen by "
                "them: otherwise you shall not have a reward of your Father who is "
                "in heaven.\n\n"
                "But thou when thou shalt pray, enter into thy chamber, and having "
                "shut the door, pray to thy Father in secret: and thy Father who "
                "seeth in secret will repay thee."
            ),
            meditation_source=douay,
        ),
        ConsecrationDay(
            3,
            "The Narrow Path",
            "Matthew 7:1-14",
            "How is Christ calling you to enter through the narrow gate? "
            "What must you leave behind?",
            meditation_text=(
                "Judge not, that you may not be judged.\n\n"
                "Ask, and it shall be given you: seek, and you shall find: knock, "
                "and it shall be opened to you.\n\n"
                "Enter ye in at the narrow gate: for wide is the gate, and broad is "
                "the way that leadeth to destruction. How narrow is the gate, and "
                "strait is the way that leadeth to life: and few there are that "
                "find it!"
            ),
            meditation_source=douay,
        ),
        ConsecrationDay(
            4,
            "Our Nothingness Before God",
            "Imitation of Christ, Book 3, Chapters 7 & 40",
            "In what ways do you rely on yourself rather than God's grace? "
            "How does recognizing your nothingness lead to greater trust in God?",
            meditation_text=(
                "That man has no good of himself, and that he cannot glory in "
                "anything.\n\n"
                "Lord, what is man, that Thou art mindful of him; or the son of man, "
                "that Thou visit him? What has man deserved that Thou should give "
                "him grace?\n\n"
                "If you could always continue to be humble and little in your own "
                "eyes, you would not so quickly fall into danger and offence."
            ),
            meditation_source=kempis,
        ),
        ConsecrationDay(
            5,
            "Rejecting Vainglory",
            "Imitation of Christ, Book 3, Chapter 40",
            "Where do you seek human approval rather than God's glory? "
            "How can you redirect your desire for praise toward glorifying God?",
            meditation_text=(
                "Truly vainglory is an evil plague, because it draws away from true "
                "glory, and robs us of heavenly grace.\n\n"
                "But true glory and holy exultation is to glory in Thee, and not in "
                "one's self; to rejoice in Thy Name, but not in one's own strength.\n\n"
                "Let Thy Name be praised, not mine; let Thy work be magnified, not "
                "mine."
            ),
            meditation_source=kempis,
        ),
        ConsecrationDay(
            6,
            "The Example of the Holy Fathers",
            "Imitation of Christ, Book 1, Chapter 18",
            "What sacrifices are you called to make for Christ? "
            "How does the example of the saints inspire you?",
            meditation_text=(
                "Look upon the lively examples of the holy Fathers in whom shone "
                "real perfection and the religious life, and you will see how little "
                "it is, and almost nothing that we do.\n\n"
                "They renounced all riches, dignities, honors and kindred; they "
                "hardly took what was necessary for life. They were poor in earthly "
                "things, but very rich in grace and virtues."
            ),
            meditation_source=kempis,
        ),
        ConsecrationDay(
            7,
            "Spiritual Lukewarmness",
            "Imitation of Christ, Book 1, Chapter 18 (cont.)",
            "Where has your spiritual fervor grown cold? "
            "How can you rekindle the fire of your first devotion?",
            meditation_text=(
                "Outwardly they suffered want, but within they were refreshed with "
                "grace and Divine consolation.\n\n"
                "Ah, the lukewarmness and negligence of our state! that we soon fall "
                "away from our first fervor, and are even now tired with life, from "
                "slothfulness and tepidity."
            ),
            meditation_source=kempis,
        ),
    ]


def _outline_days() -> list[ConsecrationDay]:
    """Days 8-34: title, source and prompt only."""
    preparatory = (
        ("Resisting Temptation", "What temptations do you struggle with most?"),
        ("Beginnings of Temptation", "How can you resist temptation at its first appearance?"),
        ("Despising the World", "What worldly pleasures hold you back from serving God?"),
        ("Amendment of Life", "What concrete steps can you take to grow in virtue today?"),
        (
            "Keeping Christ Crucified Before You",
            "How does meditation on Christ's passion strengthen you?",
        ),
    )
    weeks = (
        (
            ConsecrationPhase.knowledge_of_self,
            (
                "Knowledge of Self",
                "The Misery of Sin",
                "Our Nothingness",
                "Humility",
                "Self-Knowledge",
                "Our Weakness",
                "Trust in God Alone",
            ),
            "How does today's reading help you understand yourself better?",
        ),
        (
            ConsecrationPhase.knowledge_of_mary,
            (
                "Knowledge of the Blessed Virgin",
                "Mary's Role in Salvation",
                "Mary's Virtues",
                "Mary as Mother",
                "Mary's Intercession",
                "Devotion to Mary",
                "True Devotion",
            ),
            "What has today's meditation revealed about the Blessed Virgin?",
        ),
        (
            ConsecrationPhase.knowledge_of_jesus,
            (
                "Knowledge of Jesus Christ",
                "Jesus Our Redeemer",
                "Jesus Our King",
                "Jesus Our Friend",
                "Living in Jesus",
                "Union with Christ",
                "Preparation for Consecration",
            ),
            "How is Christ calling you to deeper union with Him?",
        ),
    )

    days = [
        ConsecrationDay(
            number,
            title,
            f"Meditation for Day {number}",
            prompt,
            meditation_source=ConsecrationPhase.preparatory.display_name,
        )
        for number, (title, prompt) in enumerate(preparatory, start=8)
    ]
    for phase, titles, prompt in weeks:
        days.extend(
            ConsecrationDay(
                number,
                title,
                f"Meditation for Day {number}",
                prompt,
                meditation_source=phase.display_name,
            )
            for number, title in zip(phase.day_range, titles)
        )
    days.append(
        ConsecrationDay(
            TOTAL_DAYS,
            "Total Consecration",
            "The Act of Consecration",
            "Record your thoughts and feelings on this day of consecration.",
        )
    )
    return days


CONSECRATION_DAYS: tuple[ConsecrationDay, ...] = tuple(_written_days() + _outline_days())


def day_content(day_number: int) -> ConsecrationDay | None:
    """Content for day 1..34, None outside the range."""
    if not 1 <= day_number <= TOTAL_DAYS:
        return None
    return CONSECRATION_DAYS[day_number - 1]
