"""
Rosary prayers in English and Latin.

Each text keeps the same line count in both languages so the formatter can
pair them; blank lines mark stanza breaks.
"""

from dataclasses import dataclass

from src.core.domain.bilingual import BilingualText, DisplayMode, format_bilingual


@dataclass(frozen=True)
class BilingualPrayer:
    prayer_id: str
    title: str
    text: BilingualText

    def formatted(self, mode: DisplayMode) -> str:
        return format_bilingual(self.text, mode)


PRAYERS: dict[str, BilingualPrayer] = {
    prayer.prayer_id: prayer
    for prayer in (
        BilingualPrayer(
            "sign_of_the_cross",
            "Sign of the Cross",
            BilingualText(
                primary=(
                    "In the name of the Father,\n"
                    "and of the Son,\n"
                    "and of the Holy Spirit.\n"
                    "Amen."
                ),
                secondary=(
                    "In nomine Patris,\n"
                    "et Filii,\n"
                    "et Spiritus Sancti.\n"
                    "Amen."
                ),
            ),
        ),
        BilingualPrayer(
            "our_father",
            "Our Father",
            BilingualText(
                primary=(
                    "Our Father, who art in heaven,\n"
                    "hallowed be thy name;\n"
                    "thy kingdom come,\n"
                    "thy will be done\n"
                    "on earth as it is in heaven.\n"
                    "Give us this day our daily bread,\n"
                    "and forgive us our trespasses,\n"
                    "as we forgive those who trespass against us;\n"
                    "and lead us not into temptation,\n"
                    "but deliver us from evil.\n"
                    "Amen."
                ),
                secondary=(
                    "Pater noster, qui es in caelis,\n"
                    "sanctificetur nomen tuum.\n"
                    "Adveniat regnum tuum.\n"
                    "Fiat voluntas tua,\n"
                    "sicut in caelo et in terra.\n"
                    "Panem nostrum quotidianum da nobis hodie,\n"
                    "et dimitte nobis debita nostra,\n"
                    "sicut et nos dimittimus debitoribus nostris.\n"
                    "Et ne nos inducas in tentationem,\n"
                    "sed libera nos a malo.\n"
                    "Amen."
                ),
            ),
        ),
        BilingualPrayer(
            "hail_mary",
            "Hail Mary",
            BilingualText(
                primary=(
                    "Hail Mary, full of grace,\n"
                    "the Lord is with thee;\n"
                    "blessed art thou among women,\n"
                    "and blessed is the fruit of thy womb, Jesus.\n"
                    "\n"
                    "Holy Mary, Mother of God,\n"
                    "pray for us sinners,\n"
                    "now and at the hour of our death.\n"
                    "Amen."
                ),
                secondary=(
                    "Ave Maria, gratia plena,\n"
                    "Dominus tecum.\n"
                    "Benedicta tu in mulieribus,\n"
                    "et benedictus fructus ventris tui, Iesus.\n"
                    "\n"
                    "Sancta Maria, Mater Dei,\n"
                    "ora pro nobis peccatoribus,\n"
                    "nunc et in hora mortis nostrae.\n"
                    "Amen."
                ),
            ),
        ),
        BilingualPrayer(
            "glory_be",
            "Glory Be",
            BilingualText(
                primary=(
                    "Glory be to the Father,\n"
                    "and to the Son,\n"
                    "and to the Holy Spirit.\n"
                    "As it was in the beginning,\n"
                    "is now, and ever shall be,\n"
                    "world without end.\n"
                    "Amen."
                ),
                secondary=(
                    "Gloria Patri,\n"
                    "et Filio,\n"
                    "et Spiritui Sancto.\n"
                    "Sicut erat in principio,\n"
                    "et nunc, et semper,\n"
                    "et in saecula saeculorum.\n"
                    "Amen."
                ),
            ),
        ),
        BilingualPrayer(
            "fatima_prayer",
            "Fatima Prayer",
            BilingualText(
                primary=(
                    "O my Jesus, forgive us our sins,\n"
                    "save us from the fires of hell;\n"
                    "lead all souls to heaven,\n"
                    "especially those in most need of thy mercy.\n"
                    "Amen."
                ),
                secondary=(
                    "Domine Iesu, dimitte nobis debita nostra,\n"
                    "salva nos ab igne inferiori,\n"
                    "perduc in caelum omnes animas,\n"
                    "praesertim eas, quae misericordiae tuae maxime indigent.\n"
                    "Amen."
                ),
            ),
        ),
        BilingualPrayer(
            "hail_holy_queen",
            "Hail Holy Queen",
            BilingualText(
                primary=(
                    "Hail, holy Queen, Mother of mercy,\n"
                    "our life, our sweetness and our hope.\n"
                    "To thee do we cry,\n"
                    "poor banished children of Eve.\n"
                    "To thee do we send up our sighs,\n"
                    "mourning and weeping in this valley of tears.\n"
                    "Turn then, most gracious advocate,\n"
                    "thine eyes of mercy toward us,\n"
                    "and after this our exile\n"
                    "show unto us the blessed fruit of thy womb, Jesus.\n"
                    "O clement, O loving,\n"
                    "O sweet Virgin Mary."
                ),
                secondary=(
                    "Salve, Regina, Mater misericordiae,\n"
                    "vita, dulcedo, et spes nostra, salve.\n"
                    "Ad te clamamus,\n"
                    "exsules filii Hevae.\n"
                    "Ad te suspiramus,\n"
                    "gementes et flentes in hac lacrimarum valle.\n"
                    "Eia, ergo, advocata nostra,\n"
                    "illos tuos misericordes oculos ad nos converte;\n"
                    "et Iesum, benedictum fructum ventris tui,\n"
                    "nobis post hoc exsilium ostende.\n"
                    "O clemens, O pia,\n"
                    "O dulcis Virgo Maria."
                ),
            ),
        ),
    )
}

# Order in which the prayers are said around one Rosary.
ROSARY_ORDER = (
    "sign_of_the_cross",
    "our_father",
    "hail_mary",
    "glory_be",
    "fatima_prayer",
    "hail_holy_queen",
)


def get_prayer(prayer_id: str) -> BilingualPrayer:
    """Lookup by id. Raises KeyError for unknown ids."""
    return PRAYERS[prayer_id]


def rosary_prayers() -> list[BilingualPrayer]:
    return [PRAYERS[prayer_id] for prayer_id in ROSARY_ORDER]
