# Prompt for generating a random word
RANDOM_WORD_PROMPT = """
Generer et tilfeldig, interessant norsk ord.

Kriterier:
1. Det bør være et ord med en interessant etymologi eller historie.
2. Det kan være et gammelt ord som fortsatt brukes, eller et poetisk ord.
3. Unngå helt trivielle ord som "hei" eller "hus", med mindre de har en sjokkerende historie.
4. Sørg for at etymologien er grundig forklart og strukturert. Bruk gjerne punktlister (start med -) for å gjøre teksten luftig og oversiktlig.
"""

# Prompt for describing a word the user searched for
SPECIFIC_WORD_PROMPT = """
Gi meg detaljert informasjon om det norske ordet "{word}".

Kriterier:
1. Definer ordet nøyaktig.
2. Forklar etymologien grundig. Det er VIKTIG å bruke punktlister (start linjen med -) for å liste opp røtter, beslektede språk eller historiske stadier for å gjøre det lettlest. Bruk avsnitt for flyttekst.
3. Hvis ordet har flere betydninger, velg den mest vanlige eller interessante.
4. List opp bøyninger korrekt.
"""

# Prompt for generating images
IMAGE_GENERATION_PROMPT = """
Lag en kunstnerisk, høykvalitets illustrasjon for det norske ordet "{word}".

Betydning: {definition}
Etymologisk bakgrunn: {etymology}

Stil:
- En blanding av klassisk bokillustrasjon og moderne minimalisme.
- Farger: Dype, nordiske farger (blåtoner, skoggrønn, hvitt, varmt treverk).
- Bildet skal visualisere ordets betydning ELLER dets historiske opprinnelse (etymologien).
- Ingen tekst i selve bildet.
- Aspekt: 4:3.
"""

# JSON schema for structured word responses
WORD_SCHEMA = {
    "name": "word_record",
    "strict": False,
    "schema": {
        "type": "object",
        "properties": {
            "word": {"type": "string", "description": "Det norske ordet."},
            "wordClass": {"type": "string", "description": "Ordklasse (f.eks. Substantiv, Verb)."},
            "definition": {"type": "string", "description": "En tydelig definisjon av ordet."},
            "etymology": {
                "type": "string",
                "description": "Detaljert beskrivelse av ordets opprinnelse. Bruk ' - ' (bindestrek) for punktlister "
                               "ved opplisting av røtter/språk, og bruk avsnitt for å dele opp teksten."
            },
            "usageExample": {"type": "string", "description": "En setning som bruker ordet i kontekst."},
            "inflections": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Liste over bøyninger (f.eks. entall, flertall, bestemt form)."
            },
            "funFact": {"type": "string", "description": "En kort, morsom funfact om ordet, hvis relevant."}
        },
        "required": ["word", "wordClass", "definition", "etymology", "usageExample", "inflections"],
    }
}
