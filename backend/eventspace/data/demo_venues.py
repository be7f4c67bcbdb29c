"""Demo catalog for dev databases (seed_service). CDMX venues, prices in MXN.

Booking dates are offsets from today so the calendar always shows some taken days.
"""

DEMO_PROVIDER_ID = "2"
DEMO_CLIENT_ID = "1"

_IMG = "https://images.unsplash.com/photo-{}?w=800"

DEMO_VENUES = [
    {
        "id": "v1",
        "provider_id": DEMO_PROVIDER_ID,
        "name": "Hacienda Los Arcos",
        "description": "Hacienda colonial del siglo XVIII con amplios jardines, fuentes tradicionales y arquitectura histórica.",
        "address": "Av. Insurgentes Sur 1234, Tlalpan",
        "zone": "Tlalpan",
        "category": "HACIENDA",
        "price": 85000,
        "capacity": 350,
        "images": [_IMG.format("1519167758481-83f550bb49b3"), _IMG.format("1464366400600-7168b8af9bc3")],
        "payment_methods": ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Estacionamiento", "Cocina", "Mobiliario", "Jardín", "Capilla", "Suite Nupcial"],
        "services": [
            {"id": "s1", "name": "Mobiliario (Mesas y Sillas)", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Limpieza post-evento", "price": 800, "is_optional": True},
            {"id": "s3", "name": "Seguridad privada", "price": 1500, "is_optional": True},
        ],
        "status": "FEATURED",
        "rating": 4.8,
        "review_count": 127,
        "views": 3420,
        "favorites": 234,
    },
    {
        "id": "v2",
        "provider_id": DEMO_PROVIDER_ID,
        "name": "Terraza Skyline CDMX",
        "description": "Terraza en el piso 25 con vista panorámica, iluminación LED y audio profesional.",
        "address": "Paseo de la Reforma 500, Polanco",
        "zone": "Polanco",
        "category": "TERRAZA",
        "price": 120000,
        "capacity": 200,
        "images": [_IMG.format("1533174072545-7a4b6ad7a6c3"), _IMG.format("1470229722913-7c0e2dbbafd3")],
        "payment_methods": ["TRANSFERENCIA"],
        "amenities": ["Valet Parking", "Barra Premium", "DJ Booth", "Terraza Techada", "Clima"],
        "services": [
            {"id": "s1", "name": "Mobiliario Lounge", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Limpieza post-evento", "price": 500, "is_optional": True},
            {"id": "s3", "name": "DJ Residente", "price": 3500, "is_optional": True},
        ],
        "status": "ACTIVE",
        "rating": 4.6,
        "review_count": 89,
        "views": 2150,
        "favorites": 178,
    },
    {
        "id": "v3",
        "provider_id": DEMO_PROVIDER_ID,
        "name": "Jardín Botánico Roma",
        "description": "Jardín secreto con vegetación exótica y pérgolas de madera para eventos boutique.",
        "address": "Calle Orizaba 89, Roma Norte",
        "zone": "Roma Norte",
        "category": "JARDIN",
        "price": 45000,
        "capacity": 100,
        "images": [_IMG.format("1510076857177-7470076d4098")],
        "payment_methods": ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Estacionamiento", "Jardín", "Pérgola", "Iluminación", "Mobiliario"],
        "services": [
            {"id": "s1", "name": "Mobiliario Vintage", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Limpieza post-evento", "price": 400, "is_optional": True},
        ],
        "status": "ACTIVE",
        "rating": 4.9,
        "review_count": 56,
        "views": 1890,
        "favorites": 145,
    },
    {
        "id": "v4",
        "provider_id": DEMO_PROVIDER_ID,
        "name": "Salón Imperial Condesa",
        "description": "Salón art déco con techos altos, candelabros de cristal y pisos de mármol.",
        "address": "Av. Ámsterdam 156, Condesa",
        "zone": "Condesa",
        "category": "SALON_EVENTOS",
        "price": 15000,
        "capacity": 180,
        "images": [_IMG.format("1505236858219-8359eb29e329")],
        "payment_methods": ["TRANSFERENCIA"],
        "amenities": ["Valet Parking", "Cocina Industrial", "Audio Profesional", "Pista de Baile", "Clima"],
        "services": [
            {"id": "s1", "name": "Mobiliario de Gala", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Limpieza post-evento", "price": 1000, "is_optional": True},
            {"id": "s3", "name": "Personal de baños", "price": 800, "is_optional": True},
        ],
        "status": "ACTIVE",
        "rating": 4.7,
        "review_count": 203,
        "views": 4560,
        "favorites": 312,
    },
    {
        "id": "v5",
        "provider_id": DEMO_PROVIDER_ID,
        "name": "Bodega Industrial 1920",
        "description": "Bodega de ladrillo aparente con techos altos, ideal para lanzamientos y fiestas.",
        "address": "Calle Colima 210, Roma Norte",
        "zone": "Roma Norte",
        "category": "BODEGA",
        "price": 11000,
        "capacity": 250,
        "images": [_IMG.format("1492684223066-81342ee5ff30")],
        "payment_methods": ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Estacionamiento", "Cocina", "Barra", "Proyector", "WiFi", "Terraza"],
        "services": [
            {"id": "s1", "name": "Mobiliario Industrial", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Limpieza post-evento", "price": 600, "is_optional": True},
        ],
        "status": "ACTIVE",
        "rating": 4.5,
        "review_count": 78,
        "views": 2340,
        "favorites": 167,
    },
    {
        "id": "v6",
        "provider_id": "3",
        "name": "Salón Diamante",
        "description": "Salón de gala con pista iluminada y barra premium en el corazón de Polanco.",
        "address": "Av. Presidente Masaryk 330, Polanco",
        "zone": "Polanco",
        "category": "SALON_EVENTOS",
        "price": 25000,
        "capacity": 300,
        "images": [_IMG.format("1514525253161-7a46d19cd819")],
        "payment_methods": ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Valet Parking", "Cocina Industrial", "Audio Profesional", "Pista de Baile", "Clima"],
        "services": [
            {"id": "s1", "name": "Mobiliario de Gala", "price": 0, "is_optional": False},
            {"id": "s2", "name": "DJ Residente", "price": 4000, "is_optional": True},
        ],
        "status": "FEATURED",
        "rating": 4.9,
        "review_count": 156,
        "views": 5200,
        "favorites": 423,
    },
    {
        "id": "v7",
        "provider_id": "3",
        "name": "Jardín Secreto Coyoacán",
        "description": "Jardín íntimo con iluminación romántica y zona lounge a unos pasos del centro de Coyoacán.",
        "address": "Calle Francisco Sosa 45, Coyoacán",
        "zone": "Coyoacán",
        "category": "JARDIN",
        "price": 12000,
        "capacity": 80,
        "images": [_IMG.format("1478146896981-b80fe463b330")],
        "payment_methods": ["TRANSFERENCIA", "EFECTIVO"],
        "amenities": ["Estacionamiento cercano", "Iluminación romántica", "Pérgola", "Zona lounge"],
        "services": [{"id": "s1", "name": "Mobiliario vintage", "price": 0, "is_optional": False}],
        "status": "ACTIVE",
        "rating": 4.9,
        "review_count": 78,
        "views": 2900,
        "favorites": 267,
    },
    {
        "id": "v8",
        "provider_id": "3",
        "name": "Hacienda San Miguel",
        "description": "Hacienda con capilla, caballerizas y jardines para bodas de hasta 500 invitados.",
        "address": "Camino Real a Xochimilco 900, Xochimilco",
        "zone": "Xochimilco",
        "category": "HACIENDA",
        "price": 95000,
        "capacity": 500,
        "images": [_IMG.format("1501281668745-f7f57925c3b4")],
        "payment_methods": ["TRANSFERENCIA"],
        "amenities": ["Capilla", "Caballerizas", "Suite nupcial", "Jardines", "Fuentes"],
        "services": [
            {"id": "s1", "name": "Coordinador de evento", "price": 0, "is_optional": False},
            {"id": "s2", "name": "Mariachi", "price": 8000, "is_optional": True},
        ],
        "status": "FEATURED",
        "rating": 5.0,
        "review_count": 89,
        "views": 7500,
        "favorites": 634,
    },
    {
        "id": "v9",
        "provider_id": "3",
        "name": "Restaurante La Terraza Oculta",
        "description": "Restaurante con salón privado y terraza para cenas de empresa.",
        "address": "Calle Durango 120, Roma Norte",
        "zone": "Roma Norte",
        "category": "RESTAURANTE",
        "price": 30000,
        "capacity": 60,
        "images": [],
        "payment_methods": ["EFECTIVO"],
        "amenities": ["Cocina", "Barra"],
        "services": None,
        "status": "BANNED",
        "rating": 3.1,
        "review_count": 12,
        "views": 640,
        "favorites": 999,
    },
]

# (venue_id, days_from_today, status, guest_count, selected_service_ids, payment_method, notes)
DEMO_BOOKINGS = [
    ("v1", 30, "CONFIRMED", 180, ["s2"], "TRANSFERENCIA", "Boda - 180 invitados"),
    ("v2", 45, "PENDING", 120, [], "TRANSFERENCIA", "Evento corporativo"),
    ("v1", 60, "CANCELLED", 90, [], "EFECTIVO", "Cancelada por el cliente"),
    ("v4", -20, "COMPLETED", 150, ["s2", "s3"], "TRANSFERENCIA", "Cena de gala"),
]

# (venue_id, user_id, rating, comment)
DEMO_REVIEWS = [
    ("v1", "1", 5, "Increíble experiencia. El lugar es mágico y el servicio impecable."),
    ("v1", "4", 5, "La hacienda es espectacular. Los jardines perfectos para fotos."),
    ("v2", "5", 4, "Vista increíble de la ciudad. Solo mejoraría el sistema de audio."),
]

# (id, category, question, answer)
DEMO_FAQS = [
    (
        "faq1",
        "Reservaciones",
        "¿Cómo puedo reservar un local?",
        "Navega al detalle del espacio, revisa la disponibilidad en el calendario y haz clic en "
        '"Solicitar Reservación". El proveedor recibirá tu solicitud y te contactará para confirmar.',
    ),
    (
        "faq2",
        "Pagos",
        "¿Cuáles son los métodos de pago aceptados?",
        "Cada local define sus métodos de pago; los más comunes son transferencia bancaria y efectivo. "
        "Los métodos aceptados aparecen en la página de detalle de cada espacio.",
    ),
    (
        "faq3",
        "Proveedores",
        "¿Cómo me convierto en proveedor?",
        "Los proveedores se verifican manualmente. Escríbenos desde el formulario de contacto y "
        "nuestro equipo evaluará tu solicitud.",
    ),
    (
        "faq4",
        "Reservaciones",
        "¿Puedo cancelar una reservación?",
        "Las políticas de cancelación dependen del proveedor. Revisa los términos antes de confirmar "
        "y acuerda cualquier cambio directamente con el proveedor.",
    ),
    (
        "faq5",
        "Comunicación",
        "¿Cómo contacto a un proveedor?",
        "Envía un mensaje al proveedor desde la página del espacio o inicia una conversación "
        "desde tu centro de mensajes.",
    ),
]
