"""SimS - single source of truth for the landing page content."""

HEADER = "SimS - Sicherheit im Supermarkt"

# Navigation
NAVIGATION = [
    {"id": 1, "url": "/", "label": "Home"},
    {"id": 2, "url": "/add-location", "label": "Daten eintragen"},
]

# Hero
BANNER = {
    "heading": "Bestands-Tracker",
    "description": (
        "Prüfe mit nur einem Klick, wie der aktuelle Andrang und die Verfügbarkeit "
        "von deinem Supermarkt ist."
    ),
    "tutorial_url": (
        "https://www.thinkwithgoogle.com/intl/en-gb/marketing-resources/programmatic/"
        "google-digital-academy/"
    ),
    "watch_label": "Watch Tutorials",
}

SERVICES = {
    "heading": "Our Services",
    "all_label": "All Services",
    "items": [
        {
            "label": "Search Engine Optimisation",
            "description": (
                "To customise the content, technical functionality and scope of your website so that "
                "your pages show for a specific set of keyword at the top of a search engine list. "
                "In the end, the goal is to attract traffic to your website when they are searching "
                "for goods, services or business-related information."
            ),
            "image_path": "images/service1.png",
        },
        {
            "label": "Content Marketing Strategy",
            "description": (
                "It is tough but well worth the effort to create clever material that is not "
                "promotional in nature, but rather educates and inspires. It lets them see you as a "
                "reliable source of information by delivering content that is meaningful to your "
                "audience."
            ),
            "image_path": "images/service2.png",
        },
        {
            "label": "Develop Social Media Strategy",
            "description": (
                "Many People rely on social networks to discover, research, and educate themselves "
                "about a brand before engaging with that organization. The more your audience wants "
                "to engage with your content, the more likely it is that they will want to share it."
            ),
            "image_path": "images/service3.png",
        },
    ],
}

ABOUT = {
    "heading": "Why choose us?",
    "title": "Why we're different",
    "image_path": "images/network.png",
    "reasons": [
        "We provides Cost-Effective Digital Marketing than Others.",
        "High customer statisfaction and experience.",
        "Marketing efficiency and quick time to value.",
        "Clear & transparent fee structure.",
        (
            "We provides Marketing automation which is an integral platform that ties all of your "
            "digital marketing together."
        ),
        "A strong desire to establish long lasting business partnerships.",
        "Provide digital marketing to mobile consumer.",
        "We provides wide range to services in reasonable prices",
    ],
}

TESTIMONIALS = {
    "heading": "What clients say?",
    "items": [
        {
            "description": (
                "Nixalar has made a huge difference to our business with his good work and knowledge "
                "of SEO and business to business marketing techniques. Our search engine rankings are "
                "better than ever and we are getting more people contacting us thanks to Jomer’s "
                "knowledge and hard work."
            ),
            "image_path": "images/user1.jpg",
            "name": "Julia hawkins",
            "designation": "Co-founder at ABC",
        },
        {
            "description": (
                "Nixalar and his team have provided us with a comprehensive, fast and well planned "
                "digital marketing strategy that has yielded great results in terms of content, SEO, "
                "Social Media. His team are a pleasure to work with, as well as being fast to respond "
                "and adapt to the needs of your brand."
            ),
            "image_path": "images/user2.jpg",
            "name": "John Smith",
            "designation": "Co-founder at xyz",
        },
    ],
}

SOCIAL = {
    "heading": "Find us on social media",
    "icon_paths": [
        "images/facebook-icon.png",
        "images/instagram-icon.png",
        "images/whatsapp-icon.png",
        "images/twitter-icon.png",
        "images/linkedin-icon.png",
        "images/snapchat-icon.png",
    ],
}

# Labels for the add-location form
DATA_ENTRY = {
    "get_location": "Momentanen Standort abfragen",
    "goods_unavailable": "Welche Waren sind ausverkauft?",
    "crowdedness": "Wie voll war der Laden?",
    "submit": "Daten absenden",
    "search_store": "In welchem Laden warst du?",
}

SITE_CONTENT = {
    "header": HEADER,
    "navigation": NAVIGATION,
    "banner": BANNER,
    "services": SERVICES,
    "about": ABOUT,
    "testimonials": TESTIMONIALS,
    "social": SOCIAL,
    "data_entry": DATA_ENTRY,
}
