#!/usr/bin/env python3
"""
Default item lists for the built-in backup profiles

User paths are relative to the home directory, system paths are absolute.
Exclude patterns use rsync glob syntax and are relative to the source being
transferred. Entries containing glob characters are expanded at enumeration
time.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Dict, Any

# --- Generic Linux profile ---

LINUX_RSYNC_ITEMS = [
    ".bashrc",
    ".profile",
    ".zshrc",
    ".bash_profile",
    ".bash_aliases",
    ".bash_history",
    ".zsh_history",
    ".zsh",
    ".oh-my-zsh",
    ".inputrc",
    ".kshrc",
    ".tcshrc",
    ".cshrc",
    ".config/fish",
    ".dircolors",
    ".selected_editor",
    ".screenrc",
    ".tmux.conf",
    ".terminfo",
    ".config",
    ".local/bin",
    ".local/share/applications",
    ".config/autostart",
    ".themes",
    ".icons",
    ".fonts",
    ".local/share/fonts",
    ".ssh",
    ".gnupg",
    ".local/share/keyrings",
    ".pki",
    ".authinfo",
    ".netrc",
    ".vimrc",
    ".vim",
    ".emacs",
    ".emacs.d",
    ".gitconfig",
    ".gitignore_global",
    ".npmrc",
    ".cargo",
    ".rustup",
    ".m2",
    ".gradle",
    ".jupyter",
    ".ipython",
    ".vscode",
    ".atom",
    ".config/nvim",
    ".mozilla/firefox",
    ".config/google-chrome",
    ".config/chromium",
    ".config/vivaldi",
    ".config/BraveSoftware/Brave-Browser",
    ".config/microsoft-edge",
    ".thunderbird",
    ".config/evolution",
    ".config/kmail2",
    ".config/akonadi",
    ".config/keepassxc",
    ".password-store",
    ".config/Signal",
    ".config/Element",
    ".config/discord",
    ".config/telegram-desktop",
    ".config/skypeforlinux",
    ".config/vlc",
    ".config/mpv",
    ".ncmpcpp",
    ".config/spotify",
    ".config/audacious",
    ".config/smplayer",
    ".config/htop",
    ".config/dconf",
    ".config/pulse",
    ".config/pipewire",
    ".gnome",
    ".config/systemd/user",
    ".config/plasma-workspace",
    ".config/kde*",
    ".config/xfce4",
    ".config/lxqt",
    ".config/lxde-qt",
    ".config/openbox",
    ".config/picom",
    ".config/dunst",
    ".config/rofi",
    ".config/polybar",
    ".config/tint2",
    ".config/caja",
    ".config/nemo",
    ".config/thunar",
    ".config/pcmanfm",
    ".config/dolphinrc",
    ".config/kdeglobals",
    ".config/kglobalshortcutsrc",
    ".config/kwinrc",
    ".config/konsole",
    ".config/gnome-terminal",
    ".config/xfce4/terminal",
    ".vagrant.d",
    ".docker",
    ".VirtualBox",
    ".config/libvirt",
    ".local/share/containers",
    ".config/sublime-text",
    ".config/inkscape",
    ".config/GIMP",
    ".config/libreoffice",
    ".config/nextcloud",
    ".config/remmina",
    ".timewarrior",
    ".taskwarrior",
    ".config/calibre",
    ".config/syncthing",
    ".config/kdeconnect",
    ".config/filezilla",
    ".config/gthumb",
    ".config/geany",
    ".config/Mousepad",
    ".config/pluma",
    ".config/xed",
]

LINUX_COPY_ITEMS = [
    ".gitconfig",
    ".gitignore_global",
    ".git-credentials",
    ".gitattributes",
    ".vimrc",
    ".ideavimrc",
    ".nanorc",
    ".editorconfig",
    ".tmux.conf",
    ".screenrc",
    ".inputrc",
    ".hushlogin",
    ".bash_history",
    ".zsh_history",
    ".ksh_history",
    ".lesshst",
    ".mysql_history",
    ".psql_history",
    ".Xresources",
    ".Xdefaults",
    ".xinitrc",
    ".xsessionrc",
    ".xprofile",
    ".Xmodmap",
    ".gtkrc-2.0",
    ".gtkrc-3.0",
    ".fonts.conf",
    ".config/gtk-3.0/settings.ini",
    ".config/gtk-4.0/settings.ini",
    ".config/mimeapps.list",
    ".config/user-dirs.dirs",
    ".config/user-dirs.locale",
    ".ICEauthority",
    ".dmrc",
    ".curlrc",
    ".wgetrc",
    ".gemrc",
    ".pylintrc",
    ".condarc",
    ".npmrc",
    ".yarnrc",
    ".psqlrc",
    ".my.cnf",
    ".irbrc",
    ".jshintrc",
    ".eslintrc",
    ".stylelintrc",
    ".selected_editor",
    ".cvsrc",
    ".subversion",
    ".config/htop/htoprc",
    ".config/neofetch/config.conf",
    ".config/bat/config",
    ".config/ranger/rc.conf",
    ".config/alacritty/alacritty.yml",
    ".config/kitty/kitty.conf",
    ".config/picom/picom.conf",
    ".config/dunst/dunstrc",
    ".config/rofi/config.rasi",
    ".config/redshift.conf",
    ".config/starship.toml",
    ".config/zathura/zathurarc",
    ".config/mpd/mpd.conf",
    ".config/ncmpcpp/config",
    ".config/okularrc",
    ".config/spectaclerc",
    ".config/kcalcrc",
    ".config/klipperrc",
    ".config/plasma-org.kde.plasma.desktop-appletsrc",
    ".config/plasmarc",
    ".config/krunnerrc",
    ".config/kactivitymanagerdrc",
    ".config/katesettingsrc",
    ".config/katerc",
    ".config/gwenviewrc",
    ".config/i3/config",
    ".config/sway/config",
    ".config/bspwm/bspwmrc",
    ".config/awesome/rc.lua",
    ".config/qtile/config.py",
    ".config/hypr/hyprland.conf",
    ".xmonad/xmonad.hs",
    ".config/polybar/config",
    ".config/tint2/tint2rc",
    ".config/openbox/rc.xml",
    ".config/xfce4/xfconf/xfce-perchannel-xml",
    ".config/lxqt/lxqt.conf",
    ".config/lxde-qt/lxqt/lxqt.conf",
    ".prettierrc",
    ".clang-format",
    ".rustfmt.toml",
    ".clippy.toml",
    ".black",
    ".scalafmt.conf",
    ".config/nvim/init.vim",
    ".config/nvim/init.lua",
    ".config/Code/User/settings.json",
    ".config/sublime-text-3/Packages/User/Preferences.sublime-settings",
    ".config/Atom/config.cson",
    ".netrc",
    ".ssh/config",
    ".config/remmina/remmina.pref",
    ".config/NetworkManager/system-connections",
    ".muttrc",
    ".config/neomutt/neomuttrc",
    ".offlineimaprc",
    ".msmtprc",
    ".config/khal/config",
    ".config/vdirsyncer/config",
    ".fehbg",
    ".xscreensaver",
    ".Xauthority",
    ".config/fontconfig/fonts.conf",
    ".config/autostart-scripts",
    ".config/systemd/user",
]

LINUX_EXCLUDE_PATTERNS = [
    "*/.cache/*",
    "*/cache/*",
    "*.log",
    "*.tmp",
    "*.temp",
    "*/tmp/*",
    "*/temp/*",
    "*/Trash/*",
    "*/Recycle.Bin/*",
    "*~",
    "*.bak",
    "*.swp",
    "*.swo",
    "*.swn",
    "*.pyc",
    "__pycache__",
    "*.o",
    "*.so",
    "*.dll",
    "*.dylib",
    "*.a",
    "*/.temp/*",
    "*/.trash/*",
    "*/thumbnails/*",
    "*/gvfs-metadata/*",
    "*/recently-used.xbel",
    "*/CacheStorage/*",
    "*/Service Worker/*",
    "*/webappsstore.sqlite",
    "*/cookies.sqlite",
    "*/favicons.sqlite",
    "*/places.sqlite",
    "*/sessionstore*",
    "*/minidumps/*",
    "*/GPUCache/*",
    "*/ShaderCache/*",
    "*/Storage/*",
    "*/IndexedDB/*",
    "*/Local Storage/*",
    "*/Session Storage/*",
    "*/Sync Data/*",
    "*/Downloads/*",
    "*/safebrowsing/*",
    "*/Code Cache/*",
    "*/User Data/*/Cache/*",
    "*/User Data/*/Service Worker/*",
    "*/User Data/*/Default/Cache/*",
    "*/User Data/*/Default/Service Worker/*",
    "*/Profiles/*/Cache/*",
    "*/Profiles/*/Service Worker/*",
    "*/crashes/*",
    "*/Code/User/globalStorage/*",
    "*/Code/User/workspaceStorage/*",
    "*/slack/Cache/*",
    "*/discord/Cache/*",
    "*/zoom/data/*",
    "*/electron/Cache/*",
    "*/Code/Cache/*",
    "*/Code/CachedData/*",
    "*/VSCode/Cache/*",
    "*/Electron/Cache/*",
    "*/Chromium/Default/Cache/*",
    "*/Google/Chrome/Default/Cache/*",
    "*/Firefox/Profiles/*/cache*",
    "*/mozilla/firefox/*/cache*",
    "*/Thunderbird/Profiles/*/cache*",
    "*/ImagingTools/*",
    "*/saved application state/*",
    "*/Application Support/*/Cache/*",
    "*/spotify/Data/*",
    "*/spotify/Storage/*",
    "*/Teams/Cache/*",
    "*/Teams/Code Cache/*",
    "*/Skype/Cache/*",
    "*/signal-desktop/Cache/*",
    "*/Postman/Cache/*",
    "*/JetBrains/*/caches/*",
    "*/JetBrains/*/log/*",
    "*/JetBrains/*/system/*",
    "*/JetBrains/*/tmp/*",
    "*/calibre/cache/*",
    "*/syncthing/index/*",
    "*/npm/*",
    "*/yarn/*",
    "*/go/*",
    "*/pip/*",
    "*/gradle/*",
    "*/composer/cache/*",
    "*/m2/repository/*",
    "*/cargo/registry/*",
    "*/node_modules/*",
    "*/vendor/*",
    "*/.vscode/extensions/*",
    "*/gems/*",
    "*/bower_components/*",
    "*/target/*",
    "*/build/*",
    "*/dist/*",
    "*/.venv/*",
    "*/env/*",
    "*/virtualenv/*",
    "*/.tox/*",
    "*/.eggs/*",
    "*/site-packages/*",
    "*/wheelhouse/*",
    "*/.pytest_cache/*",
    "*/.ipynb_checkpoints/*",
    "*/.terraform/*",
    "*/.terragrunt-cache/*",
    "*/zig-cache/*",
    "*/go-build/*",
    "*/__pycache__/*",
    "*/.mypy_cache/*",
    "*/.metals/*",
    "*/.bloop/*",
    "*/.sbt/*",
    "*/.stack/*",
    "*/.cabal/*",
    "*/.gradle/caches/*",
    "*/.m2/repository/*",
    "*/.cache-sccache/*",
    "*/zig-out/*",
    "*/.var/*",
    "*/.local/share/flatpak/*",
    "*/.local/share/containers/*",
    "*/.local/share/libvirt/*",
    "*/docker/overlay2/*",
    "*/docker/image/*",
    "*/docker/volumes/*",
    "*/VirtualBox VMs/*",
    "*/VMs/*",
    "*/lxc/*",
    "*/.vagrant.d/boxes/*",
    "*/.minikube/*",
    "*/.kube/cache/*",
    "*/.kube/http-cache/*",
    "*/.crc/*",
    "*/Steam/*",
    "*/lutris/runners/*",
    "*/Games/*",
    "*/GOG Games/*",
    "*/Epic Games/*",
    "*/Origin/*",
    "*/Ubisoft/*",
    "*/BattleNet/*",
    "*/Wine/*",
    "*/PlayOnLinux/*",
    "*/Proton/*",
    "*/Bottles/*",
    "*/.local/share/Steam/*",
    "*/.local/share/PrismLauncher/*",
    "*/.minecraft/*",
    "*/.var/app/*/data/minecraft/*",
    "*/.local/share/Trash/*",
    "*/.local/share/icc/*",
    "*/.local/share/gvfs-metadata/*",
    "*/.local/share/webkitgtk/*",
    "*/.local/state/*",
    "*/.local/share/recently-used.xbel",
    "*/.local/share/thumbnails/*",
    "*/.local/share/tracker/*",
    "*/.local/share/baloo/*",
    "*/.local/share/akonadi/*",
    "*/.local/share/zeitgeist/*",
    "*/.local/share/telepathy/*",
    "*/.pki/nssdb/*",
    "*/.esd_auth",
    "*/.goutputstream*",
    "*/dconf/user",
    "*/gvfs/*",
    "*/run/user/*",
    "*/Spotify/Data/*",
    "*/Podcasts/*",
    "*/Music/iTunes/*",
    "*/Pictures/Photos Library.photoslibrary/*",
    "*/Videos/*",
    "*/.recently-used*",
    "*.localstorage",
    "*/Dropbox/*",
    "*/OneDrive/*",
    "*/Google Drive/*",
    "*/Next Cloud/*",
    "*/iCloud/*",
    "*/snap/*/current/*",
    "*/snap/*/common/*",
    "*/flatpak/app/*/cache/*",
    "*/flatpak/app/*/files/*",
    "*/flatpak/app/*/state/*",
    "*/flatpak/app/*/data/Steam/*",
    "*/flatpak/runtime/*",
    "*/.steam/*",
    "*/.var/app/*/data/Steam/*",
    "*/timeshift/*",
]

LINUX_PRIVILEGED_ITEMS = [
    "/etc/fstab",
    "/etc/crypttab",
    "/etc/mtab",
    "/etc/hosts",
    "/etc/hostname",
    "/etc/machine-id",
    "/etc/os-release",
    "/etc/lsb-release",
    "/etc/redhat-release",
    "/etc/debian_version",
    "/etc/arch-release",
    "/etc/SuSE-release",
    "/etc/resolv.conf",
    "/etc/netplan",
    "/etc/network/interfaces",
    "/etc/network/interfaces.d",
    "/etc/NetworkManager/system-connections",
    "/etc/NetworkManager/conf.d",
    "/etc/netctl",
    "/etc/systemd/network",
    "/etc/sysconfig/network-scripts",
    "/etc/sysconfig/network",
    "/etc/hosts.allow",
    "/etc/hosts.deny",
    "/etc/nftables.conf",
    "/etc/iptables",
    "/etc/iptables.rules",
    "/etc/iptables/rules.v4",
    "/etc/iptables/rules.v6",
    "/etc/firewalld",
    "/etc/sysconfig/iptables",
    "/etc/ufw",
    "/etc/dhcp",
    "/etc/wpa_supplicant",
    "/etc/iproute2",
    "/etc/connman",
    "/etc/ppp",
    "/etc/environment",
    "/etc/profile.d",
    "/etc/profile",
    "/etc/bash.bashrc",
    "/etc/bashrc",
    "/etc/zsh",
    "/etc/ksh.kshrc",
    "/etc/csh.cshrc",
    "/etc/login.defs",
    "/etc/inputrc",
    "/etc/locale.conf",
    "/etc/locale.gen",
    "/etc/default",
    "/etc/sysconfig",
    "/etc/sysctl.conf",
    "/etc/sysctl.d",
    "/etc/security",
    "/etc/security/limits.conf",
    "/etc/security/limits.d",
    "/etc/modules",
    "/etc/modules-load.d",
    "/etc/modprobe.d",
    "/etc/vconsole.conf",
    "/etc/systemd/system.conf",
    "/etc/systemd/user.conf",
    "/etc/systemd/journald.conf",
    "/etc/systemd/logind.conf",
    "/etc/systemd/resolved.conf",
    "/etc/systemd/timesyncd.conf",
    "/etc/systemd/system",
    "/etc/systemd/user",
    "/etc/tmpfiles.d",
    "/etc/binfmt.d",
    "/etc/conf.d",
    "/etc/rc.conf",
    "/etc/conf.d/net",
    "/etc/local.d",
    "/etc/rc.local",
    "/etc/init.d",
    "/etc/inittab",
    "/etc/lilo.conf",
    "/etc/kernel/cmdline",
    "/etc/kernel/efi-stub",
    "/etc/kernels",
    "/etc/motd",
    "/etc/issue",
    "/etc/issue.net",
    "/etc/subuid",
    "/etc/subgid",
    "/etc/apt/sources.list",
    "/etc/apt/sources.list.d",
    "/etc/apt/preferences",
    "/etc/apt/preferences.d",
    "/etc/apt/apt.conf",
    "/etc/apt/apt.conf.d",
    "/etc/pacman.conf",
    "/etc/pacman.d",
    "/etc/yum.conf",
    "/etc/yum.repos.d",
    "/etc/dnf/dnf.conf",
    "/etc/dnf/modules.d",
    "/etc/zypp",
    "/etc/portage",
    "/etc/flatpak",
    "/etc/package-manager",
    "/etc/sudoers",
    "/etc/sudoers.d",
    "/etc/pam.d",
    "/etc/group",
    "/etc/passwd",
    "/etc/ssh/sshd_config",
    "/etc/ssh/ssh_config",
    "/etc/ssh/moduli",
    "/etc/ssl/certs",
    "/etc/ssl/private",
    "/etc/ca-certificates",
    "/etc/pki/tls/certs",
    "/etc/pki/tls/private",
    "/etc/pki/ca-trust",
    "/etc/pki",
    "/etc/krb5.conf",
    "/etc/krb5.conf.d",
    "/etc/fail2ban",
    "/etc/apparmor",
    "/etc/apparmor.d",
    "/etc/selinux",
    "/etc/audit",
    "/etc/opendoas/doas.conf",
    "/etc/security/access.conf",
    "/etc/default/grub",
    "/etc/grub.d",
    "/boot/grub/grub.cfg",
    "/boot/grub2/grub.cfg",
    "/boot/efi",
    "/etc/rc.d",
    "/etc/dracut.conf",
    "/etc/dracut.conf.d",
    "/etc/mkinitcpio.conf",
    "/etc/default/useradd",
    "/etc/grub.conf",
    "/etc/lightdm",
    "/etc/gdm3",
    "/etc/gdm",
    "/etc/sddm.conf",
    "/etc/sddm.conf.d",
    "/etc/X11/xorg.conf",
    "/etc/X11/xorg.conf.d",
    "/etc/X11/xinit",
    "/etc/xdg",
    "/etc/skel",
    "/etc/mdadm.conf",
    "/etc/mdadm/mdadm.conf",
    "/etc/lvm",
    "/etc/multipath",
    "/etc/autofs",
    "/etc/exports",
    "/etc/samba/smb.conf",
    "/etc/updatedb.conf",
    "/etc/udisks2",
    "/etc/systemd/journald.conf.d",
    "/etc/cron.d",
    "/etc/cron.daily",
    "/etc/cron.hourly",
    "/etc/cron.monthly",
    "/etc/cron.weekly",
    "/etc/crontab",
    "/etc/anacrontab",
    "/var/spool/cron",
    "/etc/cups",
    "/etc/ntp.conf",
    "/etc/chrony",
    "/etc/mysql",
    "/etc/my.cnf",
    "/etc/my.cnf.d",
    "/etc/postgresql",
    "/etc/nginx",
    "/etc/apache2",
    "/etc/httpd",
    "/etc/php",
    "/etc/postfix",
    "/etc/dovecot",
    "/etc/openvpn",
    "/etc/wireguard",
    "/etc/squid",
    "/etc/bind",
    "/etc/named",
    "/etc/nsd",
    "/etc/dnsmasq.conf",
    "/etc/dnsmasq.d",
    "/etc/docker",
    "/etc/containerd",
    "/etc/cni",
    "/etc/libvirt",
    "/etc/qemu",
    "/etc/haproxy",
    "/etc/redis",
    "/etc/mongodb",
    "/etc/memcached.conf",
    "/etc/pulse",
    "/etc/pipewire",
    "/etc/bluetooth",
    "/etc/rsyslog.conf",
    "/etc/rsyslog.d",
    "/etc/syslog-ng",
    "/etc/logrotate.conf",
    "/etc/logrotate.d",
    "/etc/snmp",
    "/etc/zfs",
    "/etc/dbus-1/system.d",
    "/etc/avahi",
    "/etc/polkit-1",
    "/etc/dconf",
    "/etc/gconf",
    "/etc/sane.d",
    "/etc/udev/rules.d",
    "/etc/acpi",
    "/etc/sensors.d",
    "/etc/alsa",
    "/etc/console-setup",
    "/etc/conf.d/keymaps",
    "/etc/default/console-setup",
    "/etc/kernel",
    "/etc/fonts",
    "/etc/alternatives",
    "/etc/mailcap",
    "/etc/mime.types",
    "/etc/shells",
    "/etc/timezone",
    "/etc/localtime",
    "/etc/default/locale",
    "/etc/adjtime",
    "/etc/release",
]

# --- Ubuntu profile ---

UBUNTU_RSYNC_ITEMS = [
    ".bashrc",
    ".profile",
    ".zshrc",
    ".bash_profile",
    ".bash_aliases",
    ".bash_history",
    ".zsh_history",
    ".zsh",
    ".oh-my-zsh",
    ".inputrc",
    ".dircolors",
    ".selected_editor",
    ".screenrc",
    ".tmux.conf",
    ".terminfo",
    ".config",
    ".local/bin",
    ".local/share/applications",
    ".config/autostart",
    ".themes",
    ".icons",
    ".fonts",
    ".local/share/fonts",
    ".ssh",
    ".gnupg",
    ".local/share/keyrings",
    ".pki",
    ".authinfo",
    ".netrc",
    ".vimrc",
    ".vim",
    ".emacs",
    ".emacs.d",
    ".gitconfig",
    ".gitignore_global",
    ".npmrc",
    ".cargo",
    ".rustup",
    ".m2",
    ".gradle",
    ".jupyter",
    ".ipython",
    ".vscode",
    ".atom",
    ".config/nvim",
    ".mozilla/firefox",
    ".config/google-chrome",
    ".config/chromium",
    ".config/vivaldi",
    ".thunderbird",
    ".config/evolution",
    ".config/keepassxc",
    ".password-store",
    ".config/Signal",
    ".config/Element",
    ".config/discord",
    ".config/telegram-desktop",
    ".config/vlc",
    ".config/mpv",
    ".ncmpcpp",
    ".config/spotify",
    ".config/htop",
    ".config/dconf",
    ".config/pulse",
    ".gnome",
    ".config/systemd/user",
    ".vagrant.d",
    ".docker",
    ".VirtualBox",
    ".config/libvirt",
    ".config/sublime-text",
    ".config/inkscape",
    ".config/GIMP",
    ".config/libreoffice",
    ".config/nextcloud",
    ".config/remmina",
    ".timewarrior",
    ".taskwarrior",
]

UBUNTU_COPY_ITEMS = [
    ".gitconfig",
    ".gitignore_global",
    ".git-credentials",
    ".gitattributes",
    ".vimrc",
    ".ideavimrc",
    ".nanorc",
    ".editorconfig",
    ".tmux.conf",
    ".screenrc",
    ".inputrc",
    ".hushlogin",
    ".Xresources",
    ".Xdefaults",
    ".xinitrc",
    ".xsessionrc",
    ".xprofile",
    ".Xmodmap",
    ".gtkrc-2.0",
    ".gtkrc-3.0",
    ".config/gtk-3.0/settings.ini",
    ".config/gtk-4.0/settings.ini",
    ".config/mimeapps.list",
    ".config/user-dirs.dirs",
    ".config/user-dirs.locale",
    ".curlrc",
    ".wgetrc",
    ".gemrc",
    ".pylintrc",
    ".condarc",
    ".npmrc",
    ".yarnrc",
    ".psqlrc",
    ".my.cnf",
    ".irbrc",
    ".jshintrc",
    ".eslintrc",
    ".stylelintrc",
    ".config/htop/htoprc",
    ".config/neofetch/config.conf",
    ".config/bat/config",
    ".config/ranger/rc.conf",
    ".config/alacritty/alacritty.yml",
    ".config/kitty/kitty.conf",
    ".config/picom/picom.conf",
    ".config/dunst/dunstrc",
    ".config/rofi/config.rasi",
    ".config/redshift.conf",
    ".config/starship.toml",
    ".config/zathura/zathurarc",
    ".config/mpd/mpd.conf",
    ".config/ncmpcpp/config",
    ".config/i3/config",
    ".config/sway/config",
    ".config/bspwm/bspwmrc",
    ".config/awesome/rc.lua",
    ".config/qtile/config.py",
    ".config/hypr/hyprland.conf",
    ".xmonad/xmonad.hs",
    ".config/polybar/config",
    ".prettierrc",
    ".clang-format",
    ".rustfmt.toml",
    ".clippy.toml",
    ".black",
    ".scalafmt.conf",
    ".config/nvim/init.vim",
    ".config/nvim/init.lua",
    ".config/Code/User/settings.json",
    ".config/sublime-text-3/Packages/User/Preferences.sublime-settings",
    ".netrc",
    ".ssh/config",
    ".config/remmina/remmina.pref",
    ".muttrc",
    ".config/neomutt/neomuttrc",
    ".offlineimaprc",
    ".msmtprc",
    ".config/khal/config",
    ".config/vdirsyncer/config",
    ".fehbg",
    ".xscreensaver",
    ".Xauthority",
    ".config/fontconfig/fonts.conf",
]

UBUNTU_EXCLUDE_PATTERNS = [
    "*/.cache/*",
    "*/cache/*",
    "*.log",
    "*.tmp",
    "*.temp",
    "*/tmp/*",
    "*/temp/*",
    "*/Trash/*",
    "*/Recycle.Bin/*",
    "*~",
    "*.bak",
    "*.swp",
    "*.swo",
    "*.swn",
    "*.pyc",
    "__pycache__",
    "*.o",
    "*.so",
    "*.dll",
    "*.dylib",
    "*.a",
    "*/CacheStorage/*",
    "*/Service Worker/*",
    "*/webappsstore.sqlite",
    "*/cookies.sqlite",
    "*/favicons.sqlite",
    "*/places.sqlite",
    "*/sessionstore*",
    "*/minidumps/*",
    "*/GPUCache/*",
    "*/ShaderCache/*",
    "*/Storage/*",
    "*/IndexedDB/*",
    "*/Code/User/globalStorage/*",
    "*/Code/User/workspaceStorage/*",
    "*/slack/Cache/*",
    "*/discord/Cache/*",
    "*/zoom/data/*",
    "*/electron/Cache/*",
    "*/Code/Cache/*",
    "*/Code/CachedData/*",
    "*/VSCode/Cache/*",
    "*/Electron/Cache/*",
    "*/Chromium/Default/Cache/*",
    "*/Google/Chrome/Default/Cache/*",
    "*/Firefox/Profiles/*/cache*",
    "*/mozilla/firefox/*/cache*",
    "*/Thunderbird/Profiles/*/cache*",
    "*/ImagingTools/*",
    "*/saved application state/*",
    "*/Application Support/*/Cache/*",
    "*/spotify/Data/*",
    "*/spotify/Storage/*",
    "*/Podcasts/*",
    "*/Music/iTunes/*",
    "*/Pictures/Photos Library.photoslibrary/*",
    "*/Videos/*",
    "*/Downloads/*",
    "*/npm/*",
    "*/yarn/*",
    "*/go/*",
    "*/pip/*",
    "*/gradle/*",
    "*/composer/cache/*",
    "*/m2/repository/*",
    "*/cargo/registry/*",
    "*/node_modules/*",
    "*/vendor/*",
    "*/.vscode/extensions/*",
    "*/gems/*",
    "*/bower_components/*",
    "*/target/*",
    "*/build/*",
    "*/dist/*",
    "*/.venv/*",
    "*/env/*",
    "*/virtualenv/*",
    "*/.tox/*",
    "*/.eggs/*",
    "*/site-packages/*",
    "*/wheelhouse/*",
    "*/.pytest_cache/*",
    "*/.ipynb_checkpoints/*",
    "*/.terraform/*",
    "*/.terragrunt-cache/*",
    "*/.var/*",
    "*/.local/share/flatpak/*",
    "*/.local/share/containers/*",
    "*/.local/share/libvirt/*",
    "*/docker/overlay2/*",
    "*/docker/image/*",
    "*/docker/volumes/*",
    "*/VirtualBox VMs/*",
    "*/VMs/*",
    "*/lxc/*",
    "*/.vagrant.d/boxes/*",
    "*/Steam/*",
    "*/lutris/runners/*",
    "*/Games/*",
    "*/GOG Games/*",
    "*/Epic Games/*",
    "*/Origin/*",
    "*/Ubisoft/*",
    "*/BattleNet/*",
    "*/Wine/*",
    "*/PlayOnLinux/*",
    "*/Proton/*",
    "*/.local/share/Trash/*",
    "*/.local/share/icc/*",
    "*/.local/share/gvfs-metadata/*",
    "*/.local/share/webkitgtk/*",
    "*/.local/state/*",
    "*/.local/share/recently-used.xbel",
    "*/.local/share/thumbnails/*",
    "*/.local/share/tracker/*",
    "*/.local/share/baloo/*",
    "*/.local/share/akonadi/*",
    "*/.local/share/zeitgeist/*",
    "*/.local/share/telepathy/*",
    "*/.pki/nssdb/*",
    "*/.esd_auth",
    "*/Spotify/Data/*",
    "*.localstorage",
    "*/Dropbox/*",
    "*/OneDrive/*",
    "*/Google Drive/*",
    "*/Next Cloud/*",
    "*/iCloud/*",
    "*/snap/*/current/*",
    "*/snap/*/common/*",
]

UBUNTU_PRIVILEGED_ITEMS = [
    "/etc/fstab",
    "/etc/hosts",
    "/etc/hostname",
    "/etc/machine-id",
    "/etc/os-release",
    "/etc/lsb-release",
    "/etc/resolv.conf",
    "/etc/netplan",
    "/etc/network/interfaces",
    "/etc/network/interfaces.d",
    "/etc/NetworkManager/system-connections",
    "/etc/NetworkManager/conf.d",
    "/etc/netctl",
    "/etc/systemd/network",
    "/etc/hosts.allow",
    "/etc/hosts.deny",
    "/etc/nftables.conf",
    "/etc/iptables",
    "/etc/ufw",
    "/etc/dhcp",
    "/etc/wpa_supplicant",
    "/etc/iproute2",
    "/etc/sysconfig/network-scripts",
    "/etc/environment",
    "/etc/profile.d",
    "/etc/profile",
    "/etc/bash.bashrc",
    "/etc/zsh",
    "/etc/inputrc",
    "/etc/locale.conf",
    "/etc/locale.gen",
    "/etc/default",
    "/etc/sysctl.conf",
    "/etc/sysctl.d",
    "/etc/security",
    "/etc/security/limits.conf",
    "/etc/security/limits.d",
    "/etc/modules",
    "/etc/modules-load.d",
    "/etc/modprobe.d",
    "/etc/vconsole.conf",
    "/etc/systemd/system.conf",
    "/etc/systemd/user.conf",
    "/etc/systemd/journald.conf",
    "/etc/systemd/logind.conf",
    "/etc/systemd/resolved.conf",
    "/etc/systemd/timesyncd.conf",
    "/etc/systemd/system",
    "/etc/tmpfiles.d",
    "/etc/rc.local",
    "/etc/motd",
    "/etc/issue",
    "/etc/issue.net",
    "/etc/apt/sources.list",
    "/etc/apt/sources.list.d",
    "/etc/apt/preferences",
    "/etc/apt/preferences.d",
    "/etc/apt/apt.conf",
    "/etc/apt/apt.conf.d",
    "/etc/pacman.conf",
    "/etc/pacman.d",
    "/etc/yum.conf",
    "/etc/yum.repos.d",
    "/etc/dnf/dnf.conf",
    "/etc/dnf/modules.d",
    "/etc/zypp",
    "/etc/flatpak",
    "/etc/sudoers",
    "/etc/sudoers.d",
    "/etc/pam.d",
    "/etc/login.defs",
    "/etc/group",
    "/etc/passwd",
    "/etc/ssh/sshd_config",
    "/etc/ssh/ssh_config",
    "/etc/ssl/certs",
    "/etc/ssl/private",
    "/etc/ca-certificates",
    "/etc/krb5.conf",
    "/etc/fail2ban",
    "/etc/apparmor",
    "/etc/apparmor.d",
    "/etc/selinux",
    "/etc/openssl",
    "/etc/pki",
    "/etc/default/grub",
    "/etc/grub.d",
    "/boot/grub/grub.cfg",
    "/boot/grub2/grub.cfg",
    "/boot/efi",
    "/etc/rc.d",
    "/etc/init.d",
    "/etc/inittab",
    "/etc/dracut.conf",
    "/etc/dracut.conf.d",
    "/etc/mkinitcpio.conf",
    "/etc/default/useradd",
    "/etc/lightdm",
    "/etc/gdm3",
    "/etc/gdm",
    "/etc/sddm.conf",
    "/etc/sddm.conf.d",
    "/etc/X11/xorg.conf",
    "/etc/X11/xorg.conf.d",
    "/etc/X11/xinit",
    "/etc/xdg",
    "/etc/crypttab",
    "/etc/mdadm.conf",
    "/etc/mdadm/mdadm.conf",
    "/etc/lvm",
    "/etc/multipath",
    "/etc/mtab",
    "/etc/autofs",
    "/etc/exports",
    "/etc/samba/smb.conf",
    "/etc/updatedb.conf",
    "/etc/cron.d",
    "/etc/cron.daily",
    "/etc/cron.hourly",
    "/etc/cron.monthly",
    "/etc/cron.weekly",
    "/etc/crontab",
    "/etc/cups",
    "/etc/ntp.conf",
    "/etc/chrony",
    "/etc/mysql",
    "/etc/postgresql",
    "/etc/nginx",
    "/etc/apache2",
    "/etc/httpd",
    "/etc/php",
    "/etc/postfix",
    "/etc/dovecot",
    "/etc/openvpn",
    "/etc/wireguard",
    "/etc/squid",
    "/etc/bind",
    "/etc/named",
    "/etc/nsd",
    "/etc/dnsmasq.conf",
    "/etc/dnsmasq.d",
    "/etc/docker",
    "/etc/libvirt",
    "/etc/qemu",
    "/etc/default/docker",
    "/etc/containerd",
    "/etc/cni",
    "/etc/haproxy",
    "/etc/redis",
    "/etc/mongodb",
    "/etc/memcached.conf",
    "/etc/pulse",
    "/etc/bluetooth",
    "/etc/rsyslog.conf",
    "/etc/rsyslog.d",
    "/etc/logrotate.conf",
    "/etc/logrotate.d",
    "/etc/audit",
    "/etc/udev/rules.d",
    "/etc/udisks2",
    "/etc/acpi",
    "/etc/sensors.d",
    "/etc/sane.d",
    "/etc/alsa",
    "/etc/console-setup",
    "/etc/kernel",
    "/etc/fonts",
    "/etc/dconf",
    "/etc/alternatives",
    "/etc/mailcap",
    "/etc/mime.types",
    "/etc/shells",
    "/etc/timezone",
    "/etc/localtime",
    "/var/spool/cron",
]

DEFAULT_PROFILE = "linux"

PROFILES: Dict[str, Dict[str, Any]] = {
    "linux": {
        "archive_base_name": "linux-config-backup",
        "rsync_style_items": LINUX_RSYNC_ITEMS,
        "direct_copy_items": LINUX_COPY_ITEMS,
        "exclude_patterns": LINUX_EXCLUDE_PATTERNS,
        "privileged_items": LINUX_PRIVILEGED_ITEMS,
    },
    "ubuntu": {
        "archive_base_name": "ubuntu-config-backup",
        "rsync_style_items": UBUNTU_RSYNC_ITEMS,
        "direct_copy_items": UBUNTU_COPY_ITEMS,
        "exclude_patterns": UBUNTU_EXCLUDE_PATTERNS,
        "privileged_items": UBUNTU_PRIVILEGED_ITEMS,
    },
}
