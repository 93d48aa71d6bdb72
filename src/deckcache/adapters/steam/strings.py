"""Display text for Steam Deck and SteamOS compatibility report tokens."""

from types import MappingProxyType

STEAM_DECK_STRINGS = MappingProxyType(
    {
        "SteamDeckVerified_TestResult_DefaultControllerConfigFullyFunctional": (
            "All functionality is accessible when using the default controller configuration"
        ),
        "SteamDeckVerified_TestResult_ControllerGlyphsMatchDeckDevice": (
            "This game shows Steam Deck controller icons"
        ),
        "SteamDeckVerified_TestResult_DefaultConfigurationIsPerformant": (
            "This game's default graphics configuration performs well on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_InterfaceTextIsLegible": (
            "In-game interface text is legible on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_DefaultControllerConfigNotFullyFunctional": (
            "Some functionality is not accessible when using the default controller configuration, requiring use of the touchscreen or virtual keyboard, or a community configuration"
        ),
        "SteamDeckVerified_TestResult_ControllerGlyphsDoNotMatchDeckDevice": (
            "This game sometimes shows mouse, keyboard, or non-Steam-Deck controller icons"
        ),
        "SteamDeckVerified_TestResult_DefaultConfigurationIsNotPerformant": (
            "This game requires manual configuration of graphics settings to perform well on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_TextInputDoesNotAutomaticallyInvokesKeyboard": (
            "Entering some text requires manually invoking the on-screen keyboard"
        ),
        "SteamDeckVerified_TestResult_InterfaceTextIsNotLegible": (
            "Some in-game text is small and may be difficult to read"
        ),
        "SteamDeckVerified_TestResult_NativeResolutionNotSupported": (
            "This game doesn't support Steam Deck's native display resolution and may experience degraded performance"
        ),
        "SteamDeckVerified_TestResult_NativeResolutionNotDefault": (
            "This game supports Steam Deck's native display resolution but does not set it by default and may require you to configure the display resolution manually"
        ),
        "SteamDeckVerified_TestResult_DisplayOutputHasNonblockingIssues": (
            "This game has minor graphics/display issues on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_AudioOutputHasNonblockingIssues": (
            "This game has minor audio issues on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_DeviceCompatibilityWarningsShown": (
            "This game displays compatibility warnings when running on Steam Deck, but runs fine"
        ),
        "SteamDeckVerified_TestResult_LauncherInteractionIssues": (
            "This game's launcher/setup tool may require the touchscreen or virtual keyboard, or have difficult to read text"
        ),
        "SteamDeckVerified_TestResult_VideoPlaybackHasNonblockingIssues": (
            "Some in-game movie content may be missing or have playback issues"
        ),
        "SteamDeckVerified_TestResult_GameOrLauncherDoesntExitCleanly": (
            "This game does not exit cleanly and may require you to manually quit via the Steam overlay"
        ),
        "SteamDeckVerified_TestResult_AuxFunctionalityNotAccessible_MapEditor": (
            "Some auxiliary functionality is not accessible on Steam Deck: map editor"
        ),
        "SteamDeckVerified_TestResult_MultiWindowAppAutomaticallySetsFocus": (
            "This game uses multiple windows and may require you to focus the appropriate windows manually via the Steam overlay"
        ),
        "SteamDeckVerified_TestResult_DisplayOutputNotCorrectlyScaled": (
            "This game is incorrectly scaled on Steam Deck and may require you to configure the display resolution manually"
        ),
        "SteamDeckVerified_TestResult_ResumeFromSleepNotFunctional": (
            "This game may experience temporary issues after sleeping on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_GamepadNotEnabledByDefault": (
            "This game requires manually enabling controller support using in-game settings"
        ),
        "SteamDeckVerified_TestResult_CloudSavesNotEnabledByDefault": (
            "This game requires manually enabling Steam Cloud support for saved games using in-game settings"
        ),
        "SteamDeckVerified_TestResult_NotFullyFunctionalWithoutExternalKeyboard": (
            "Parts of this game would benefit from using an external keyboard"
        ),
        "SteamDeckVerified_TestResult_NotFullyFunctionalWithoutExternalWebcam": (
            "This game requires certain external devices: Webcam"
        ),
        "SteamDeckVerified_TestResult_NotFullyFunctionalWithoutExternalUSBGuitar": (
            "This game requires certain external devices: USB Guitar"
        ),
        "SteamDeckVerified_TestResult_SteamOSDoesNotSupport": (
            "Valve is still working on adding support for this game on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_SteamOSDoesNotSupport_VR": (
            "Steam Deck does not support VR games"
        ),
        "SteamDeckVerified_TestResult_SteamOSDoesNotSupport_Software": (
            "This is a Software title and is not supported on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_SteamOSDoesNotSupport_Retired": (
            "This game has been retired or is no longer in a playable state and is not supported on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_UnsupportedAntiCheat_Other": (
            "This game is unsupported on Steam Deck due to use of an unsupported anti-cheat or multiplayer service"
        ),
        "SteamDeckVerified_TestResult_UnsupportedAntiCheatConfiguration": (
            "This game's anti-cheat is not configured to support Steam Deck"
        ),
        "SteamDeckVerified_TestResult_UnsupportedGraphicsPerformance": (
            "This game's graphics settings cannot be configured to run well on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_SteamOSDoesNotSupport_OperatingSystem": (
            "This game requires an operating system that is not currently supported on Steam Deck"
        ),
        "SteamDeckVerified_TestResult_FirstTimeSetupRequiresActiveInternetConnection": (
            "This game's first-time setup requires an active Internet connection"
        ),
        "SteamDeckVerified_TestResult_SingleplayerGameplayRequiresActiveInternetConnection": (
            "Singleplayer gameplay requires an active Internet connection"
        ),
        "SteamDeckVerified_TestResult_CrossPlatformCloudSavesNotSupported": (
            "This game does not support cross-platform saved games"
        ),
        "SteamDeckVerified_TestResult_ExternalControllersNotSupportedPrimaryPlayer": (
            "This game does not default to external Bluetooth/USB controllers on Deck, and may require manually switching the active controller via the Quick Access Menu"
        ),
        "SteamDeckVerified_TestResult_ExternalControllersNotSupportedLocalMultiplayer": (
            "This game does not support external Bluetooth/USB controllers on Deck for local multiplayer"
        ),
        "SteamDeckVerified_TestResult_SimultaneousInputGyroTrackpadFriendly": (
            "This game supports using the gyro/trackpad in mouse mode for camera controls with gamepad controls for movement"
        ),
        "SteamDeckVerified_TestResult_HDRMustBeManuallyEnabled": (
            "This game supports HDR but it must be manually enabled using in-game settings"
        ),
        "SteamOS_TestResult_GameStartupFunctional": (
            "This game runs successfully on SteamOS"
        ),
        "SteamOS_TestResult_SteamOSDoesNotSupport": (
            "Valve is still working on adding support for this game on SteamOS"
        ),
        "SteamOS_TestResult_UnsupportedAntiCheatConfiguration": (
            "This game's anti-cheat is not configured to support SteamOS"
        ),
        "SteamOS_TestResult_UnsupportedAntiCheat_Other": (
            "This game is unsupported on SteamOS due to use of an unsupported anti-cheat or multiplayer service"
        ),
        "SteamOS_TestResult_SteamOSDoesNotSupport_Software": (
            "This is a Software title and is not supported on SteamOS"
        ),
        "SteamOS_TestResult_SteamOSDoesNotSupport_Retired": (
            "This game has been retired or is no longer in a playable state and is not supported on SteamOS"
        ),
        "SteamOS_TestResult_SteamOSDoesNotSupport_OperatingSystem": (
            "This game requires an operating system that is not currently supported on SteamOS"
        ),
        "SteamOS_TestResult_LauncherInteractionIssues": (
            "This game's launcher/setup tool may require a touchscreen or virtual keyboard, or have difficult to read text"
        ),
        "SteamOS_TestResult_TextInputDoesNotAutomaticallyInvokesKeyboard": (
            "Entering some text requires manually invoking the on-screen keyboard"
        ),
        "SteamOS_TestResult_DefaultControllerConfigNotFullyFunctional": (
            "Some functionality is not accessible when using the default controller configuration, requiring use of the touchscreen or virtual keyboard, or a community configuration"
        ),
        "SteamOS_TestResult_GameOrLauncherDoesntExitCleanly": (
            "This game does not exit cleanly and may require you to manually quit via the Steam overlay"
        ),
        "SteamOS_TestResult_VideoPlaybackHasNonblockingIssues": (
            "Some in-game movie content may be missing or have playback issues"
        ),
        "SteamOS_TestResult_DisplayOutputHasNonblockingIssues": (
            "This game has minor graphics/display issues on SteamOS"
        ),
        "SteamOS_TestResult_AudioOutputHasNonblockingIssues": (
            "This game has minor audio issues on SteamOS"
        ),
        "SteamOS_TestResult_AuxFunctionalityNotAccessible_MapEditor": (
            "Some auxilliary functionality is not accessible on SteamOS: map editor"
        ),
        "SteamOS_TestResult_MultiWindowAppAutomaticallySetsFocus": (
            "This game uses multiple windows and may require you to focus the appropriate windows manually via the Steam overlay"
        ),
        "SteamOS_TestResult_DisplayOutputNotCorrectlyScaled": (
            "This game is incorrectly scaled on SteamOS and may require you to configure the display resolution manually"
        ),
        "SteamOS_TestResult_ResumeFromSleepNotFunctional": (
            "This game may experience temporary issues after sleeping on SteamOS"
        ),
        "SteamOS_TestResult_GamepadNotEnabledByDefault": (
            "This game requires manually enabling controller support using in-game settings"
        ),
        "SteamOS_TestResult_CloudSavesNotEnabledByDefault": (
            "This game requires manually enabling Steam Cloud support for saved games using in-game settings"
        ),
        "SteamOS_TestResult_NotFullyFunctionalWithoutExternalKeyboard": (
            "Parts of this game would benefit from using an external keyboard"
        ),
        "SteamOS_TestResult_NotFullyFunctionalWithoutExternalWebcam": (
            "This game requires certain external devices: Webcam"
        ),
        "SteamOS_TestResult_NotFullyFunctionalWithoutExternalUSBGuitar": (
            "This game requires certain external devices: USB Guitar"
        ),
        "SteamOS_TestResult_FirstTimeSetupRequiresActiveInternetConnection": (
            "This game's first-time setup requires an active Internet connection"
        ),
        "SteamOS_TestResult_SingleplayerGameplayRequiresActiveInternetConnection": (
            "Singleplayer gameplay requires an active Internet connection"
        ),
        "SteamOS_TestResult_CrossPlatformCloudSavesNotSupported": (
            "This game does not support cross-platform saved games"
        ),
        "SteamOS_TestResult_ExternalControllersNotSupportedPrimaryPlayer": (
            "This game does not default to external Bluetooth/USB controllers on SteamOS, and may require manually switching the active controller via the Quick Access Menu"
        ),
        "SteamOS_TestResult_ExternalControllersNotSupportedLocalMultiplayer": (
            "This game does not support external Bluetooth/USB controllers on SteamOS for local multiplayer"
        ),
        "SteamOS_TestResult_SimultaneousInputGyroTrackpadFriendly": (
            "This game supports using the gyro/trackpad in mouse mode for camera controls with gamepad controls for movement"
        ),
        "SteamOS_TestResult_HDRMustBeManuallyEnabled": (
            "This game supports HDR but it must be manually enabled using in-game settings"
        ),
        "SteamDeckVerified_DescriptionHeader": (
            "Valve's testing indicates this title is %1$s on Steam Deck. %2$s"
        ),
        "SteamDeckVerified_DescriptionHeader_WithAppName": (
            "Valve's testing indicates that %1$s is %2$s on Steam Deck. %3$s"
        ),
        "SteamDeckVerified_DescriptionHeader_Verified": (
            "This game is fully functional on Steam Deck, and works great with the built-in controls and display."
        ),
        "SteamDeckVerified_DescriptionHeader_Playable": (
            "This game is functional on Steam Deck, but might require extra effort to interact with or configure."
        ),
        "SteamDeckVerified_DescriptionHeader_Unsupported": (
            "Some or all of this game currently doesn't function on Steam Deck."
        ),
        "SteamDeckVerified_DescriptionHeader_Unknown": (
            "Valve is still learning about this title. We do not currently have further information regarding Steam Deck compatibility."
        ),
        "SteamDeckVerified_DescriptionHeader_Unknown_WithAppName": (
            "Valve is still learning about %1$s. We do not currently have further information regarding Steam Deck compatibility."
        ),
        "SteamDeckVerified_DescriptionHeader_DeveloperBlog": (
            "The developer has provided additional information regarding Steam Deck support for this game. Learn more on their Community Page by pressing"
        ),
        "SteamDeckVerified_DescriptionHeader_DeveloperBlog_Desktop": (
            "The developer has provided additional information regarding Steam Deck support for this game. Learn more on their Community Page."
        ),
        "SteamDeckVerified_ViewDeveloperPost": (
            "View Developer Post"
        ),
        "SteamDeckVerified_Category_Verified": (
            "Verified"
        ),
        "SteamDeckVerified_Category_Playable": (
            "Playable"
        ),
        "SteamDeckVerified_Category_Unsupported": (
            "Unsupported"
        ),
        "SteamDeckVerified_Category_Unknown": (
            "Unknown"
        ),
        "SteamOSCompatibility_DescriptionHeader": (
            "Based on Steam Deck verification results, our testing indicates this title is %1$s on SteamOS. %2$s"
        ),
        "SteamOSCompatibility_DescriptionHeader_WithAppName": (
            "Based on Steam Deck verification results, our testing indicates that %1$s is %2$s with devices running SteamOS. %3$s"
        ),
        "SteamOSCompatibility_DescriptionHeader_Unknown": (
            "Valve is still learning about this title. We do not currently have further information regarding SteamOS compatibility."
        ),
        "SteamOSCompatibility_DescriptionHeader_Unknown_WithAppName": (
            "Valve is still learning about %1$s. We do not currently have further information regarding SteamOS compatibility."
        ),
        "SteamOSCompatibility_DescriptionHeader_Compatible": (
            "Your experience in terms of performance and input may vary depending on your hardware."
        ),
        "SteamOSCompatibility_DescriptionHeader_Unsupported": (
            "Some or all of this game currently doesn't function on SteamOS."
        ),
        "SteamOSCompatibility_Category_Compatible": (
            "Compatible"
        ),
        "SteamOSCompatibility_Category_Unsupported": (
            "Unsupported"
        ),
        "SteamOSCompatibility_Category_Unknown": (
            "Unknown"
        ),
    }
)


def describe(loc_token: str) -> str:
    """Return the display text for a report token, or the bare token name."""
    name = loc_token[1:] if loc_token.startswith("#") else loc_token
    return STEAM_DECK_STRINGS.get(name, name)
