"""About section copy, one entry per locale."""

from pydantic import BaseModel, ConfigDict

from folio.i18n import DEFAULT_LOCALE


class AboutSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    highlight: str
    paragraphs: list[str]


ABOUT_CONTENT: dict[str, AboutSection] = {
    "en": AboutSection(
        title="About me",
        highlight="Turning ideas and design into meaningful web experiences.",
        paragraphs=[
            "I’m an Electronics Engineer who found his way into front-end development "
            "through design. What excites me about the web is the balance between logic "
            "and creativity, transforming visuals and mockups into interactive digital "
            "experiences.",
            "My background in photo and video editing shaped my eye for detail, aesthetics "
            "and storytelling. Front-end development became the natural point where design "
            "meets code, allowing me to work on websites from concept to implementation "
            "with a focus on clarity and usability.",
            "Front-end is my main focus and passion, while full-stack knowledge helps me "
            "better understand how applications work as a whole. My goal is to build a "
            "strong portfolio of clean, intentional websites that feel intuitive and "
            "enjoyable to use.",
            "I’m especially drawn to creative studio environments where website design and "
            "implementation go hand in hand. I thrive in collaborative teams and aim to "
            "grow through meaningful, real-world projects.",
        ],
    ),
    "gr": AboutSection(
        title="Σχετικά με εμένα",
        highlight="Μετατρέποντας ιδέες και design σε ουσιαστικές web εμπειρίες.",
        paragraphs=[
            "Είμαι Ηλεκτρονικός Μηχανικός που οδηγήθηκε στο front-end development μέσα από "
            "το design. Αυτό που με γοητεύει στο web είναι η ισορροπία ανάμεσα στη λογική "
            "και τη δημιουργικότητα, η μετατροπή ιδεών και mockups σε διαδραστικές "
            "ψηφιακές εμπειρίες.",
            "Η ενασχόλησή μου με το photo και video editing διαμόρφωσε τον τρόπο που "
            "προσεγγίζω την αισθητική, τη λεπτομέρεια και το storytelling. Το front-end "
            "αποτέλεσε το φυσικό σημείο όπου το design συναντά τον κώδικα.",
            "Το front-end είναι το βασικό μου αντικείμενο και πάθος, ενώ η γνώση του full "
            "stack με βοηθά να κατανοώ καλύτερα τη συνολική λειτουργία μιας εφαρμογής.",
            "Με ελκύουν περιβάλλοντα δημιουργικού χαρακτήρα, όπου το website design και η "
            "υλοποίηση συνδυάζονται ουσιαστικά. Απολαμβάνω τη συνεργασία και τη συνεχή "
            "εξέλιξη μέσα από πραγματικά projects.",
        ],
    ),
}


def get_about(locale: str) -> AboutSection:
    return ABOUT_CONTENT.get(locale) or ABOUT_CONTENT[DEFAULT_LOCALE]
